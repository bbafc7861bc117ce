from pathlib import Path

import pytest

from refcounter.config import DEFAULT_EXPORT_FILENAME, load_config


def test_load_config_defaults_without_path():
    config = load_config()

    assert config.export.filename == DEFAULT_EXPORT_FILENAME
    assert config.export.directory == Path("output")
    assert config.logging.level == "INFO"
    assert config.ui.layout == "wide"


def test_load_config_resolves_export_directory_relative_to_file(tmp_path):
    config_path = tmp_path / "conf" / "config.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        "export:\n  directory: reports\n  filename: counts.txt\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.export.directory == (tmp_path / "conf" / "reports").resolve()
    assert config.export.path.name == "counts.txt"
    assert config.logging.level == "DEBUG"


def test_load_config_empty_file_uses_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    config = load_config(config_path)

    assert config.export.filename == DEFAULT_EXPORT_FILENAME
    assert config.export.directory == (tmp_path / "output").resolve()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "sheet:\n  name: Other\n",
        "export:\n  skip_rows: 3\n",
        "export:\n  filename: '  '\n",
    ],
)
def test_load_config_rejects_invalid_sections(tmp_path, content):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_repository_config_is_valid():
    config = load_config(Path(__file__).resolve().parent.parent / "config" / "config.yaml")

    assert config.export.filename == DEFAULT_EXPORT_FILENAME
