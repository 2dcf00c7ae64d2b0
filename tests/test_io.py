import pytest

from stressstrainplotter.model.io import IOManager


def test_read_input_strips_bom(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes("\ufeff1 100\n2 180\n".encode("utf-8"))
    assert IOManager.read_input(str(path)) == "1 100\n2 180\n"


def test_read_missing_file(tmp_path, caplog):
    with pytest.raises(OSError):
        IOManager.read_input(str(tmp_path / "missing.txt"))
    assert "Failed to read input data" in caplog.text


def test_write_script_uses_unix_newlines(tmp_path):
    path = tmp_path / "out.mac"
    IOManager.write_script("/prep7\nTBTEMP, 22\n", str(path))
    assert path.read_bytes() == b"/prep7\nTBTEMP, 22\n"


def test_read_non_utf8_file(tmp_path, caplog):
    path = tmp_path / "data.txt"
    path.write_bytes(b"1 100\n\xff\xfe 2\n")
    with pytest.raises(UnicodeDecodeError):
        IOManager.read_input(str(path))
    assert "Failed to read input data" in caplog.text
