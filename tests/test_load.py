import pytest

from ilda_decode.cli import inspect_file, load_bytes
from ilda_decode.errors import ReadFailed

from conftest import frame


def test_load_bytes_reads_file(tmp_path):
    p = tmp_path / "one.ild"
    p.write_bytes(frame(5, [(1, 2, 0, 0, (3, 4, 5))]))
    assert load_bytes(p) == p.read_bytes()


@pytest.mark.parametrize("name", ["missing.ild", "."])
def test_load_bytes_read_failure(tmp_path, name):
    with pytest.raises(ReadFailed) as exc:
        load_bytes(tmp_path / name)
    assert exc.value.to_diagnostic()["code"] == "E_READ_FAILED"


def test_inspect_unreadable_path(tmp_path):
    result = inspect_file(tmp_path / "missing.ild")
    assert result["status"] == "FAIL"
    assert result["error_count"] == 1
    assert result["errors"][0]["code"] == "E_READ_FAILED"
