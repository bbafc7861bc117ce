"""Configuration loading utilities for the reference counter."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type

import yaml

DEFAULT_EXPORT_FILENAME = "reference_counts.txt"


@dataclass
class ExportConfig:
    """Where the tally text file is written when exporting to disk."""

    directory: Path = Path("output")
    filename: str = DEFAULT_EXPORT_FILENAME

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    def resolved(self, base_path: Path) -> "ExportConfig":
        return ExportConfig(
            directory=_resolve_path(self.directory, base_path),
            filename=self.filename,
        )


@dataclass
class UIConfig:
    """Settings for the Streamlit page."""

    page_title: str = "Compteur de Références"
    layout: str = "wide"


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    """Container for all configuration used by the CLI and the UI."""

    export: ExportConfig = field(default_factory=ExportConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def resolved(self, base_path: Path) -> "AppConfig":
        return AppConfig(
            export=self.export.resolved(base_path),
            ui=self.ui,
            logging=self.logging,
        )


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load :class:`AppConfig` from a YAML file.

    Without ``path`` the built-in defaults are returned.  The sheet name and
    the number of header rows are fixed and cannot be configured.
    """

    if path is None:
        return AppConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file '{config_path}' does not exist")

    with config_path.open("r", encoding="utf-8") as stream:
        raw_config: Mapping[str, Any] = yaml.safe_load(stream) or {}

    if not isinstance(raw_config, Mapping):
        raise ValueError("Configuration root must be a mapping")

    unknown = set(raw_config) - {"export", "ui", "logging"}
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    export = ExportConfig(**_parse_export_section(raw_config.get("export") or {}))
    ui = UIConfig(**_parse_section(UIConfig, raw_config.get("ui") or {}, "ui"))
    logging_config = LoggingConfig(
        **_parse_section(LoggingConfig, raw_config.get("logging") or {}, "logging")
    )

    config = AppConfig(export=export, ui=ui, logging=logging_config)
    return config.resolved(config_path.parent)


def _parse_export_section(section: Mapping[str, Any]) -> Dict[str, Any]:
    parsed = _parse_section(ExportConfig, section, "export")
    if "directory" in parsed:
        parsed["directory"] = Path(str(parsed["directory"]))
    if "filename" in parsed:
        filename = str(parsed["filename"]).strip()
        if not filename:
            raise ValueError("export.filename must not be empty")
        parsed["filename"] = filename
    return parsed


def _parse_section(cls: Type[Any], section: Mapping[str, Any], name: str) -> Dict[str, Any]:
    if not isinstance(section, Mapping):
        raise ValueError(f"Configuration section '{name}' must be a mapping")
    allowed = {field_info.name for field_info in fields(cls)}
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(
            f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}"
        )
    return dict(section)


def _resolve_path(path: Path, base_path: Path) -> Path:
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_path / expanded).resolve()


__all__ = [
    "AppConfig",
    "DEFAULT_EXPORT_FILENAME",
    "ExportConfig",
    "LoggingConfig",
    "UIConfig",
    "load_config",
]
