from refcounter.config import DEFAULT_EXPORT_FILENAME, ExportConfig
from refcounter.reporting import export_tally, serialize_tally, tally_to_bytes


def test_serialize_tally_uses_tabs_and_newlines_without_trailer():
    content = serialize_tally({"REF1": 2, "REF2": 10})

    assert content == "REF1\t2\nREF2\t10"
    assert not content.endswith("\n")


def test_serialize_single_entry():
    assert serialize_tally({"REF1": 2}) == "REF1\t2"


def test_serialize_empty_tally_is_empty_string():
    assert serialize_tally({}) == ""


def test_serialize_empty_key():
    assert serialize_tally({"": 3}) == "\t3"


def test_tally_to_bytes_encodes_utf8():
    assert tally_to_bytes({"Câble": 1}) == "Câble\t1".encode("utf-8")


def test_export_tally_writes_exact_content(tmp_path):
    output = ExportConfig(directory=tmp_path / "nested" / "out")

    path = export_tally({"REF1": 2, "Éclairage": 1}, output)

    assert path == tmp_path / "nested" / "out" / DEFAULT_EXPORT_FILENAME
    assert path.read_bytes() == "REF1\t2\nÉclairage\t1".encode("utf-8")


def test_export_tally_empty_creates_empty_file(tmp_path):
    path = export_tally({}, ExportConfig(directory=tmp_path, filename="counts.txt"))

    assert path.name == "counts.txt"
    assert path.read_bytes() == b""
