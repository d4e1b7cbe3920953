"""
Name: Temp File Store Tests

Responsibilities:
  - Scoped files carry the given name/suffix and content
  - Files are removed on normal exit and on error
"""

import pytest

from workdesk.infrastructure.storage import TempFileStore

pytestmark = pytest.mark.unit


def test_scoped_file_is_written_then_removed(tmp_path):
    store = TempFileStore(str(tmp_path))

    with store.scoped(b"payload", name="work_hours_ACC1", suffix=".xlsx") as path:
        assert path.exists()
        assert path.parent == tmp_path
        assert path.name.startswith("work_hours_ACC1_")
        assert path.suffix == ".xlsx"
        assert path.read_bytes() == b"payload"

    assert not path.exists()


def test_scoped_file_is_removed_when_body_raises(tmp_path):
    store = TempFileStore(str(tmp_path))

    with pytest.raises(ValueError):
        with store.scoped(b"x", name="report", suffix=".xlsx"):
            raise ValueError("send failed")

    assert list(tmp_path.iterdir()) == []


def test_concurrent_scopes_get_distinct_files(tmp_path):
    store = TempFileStore(str(tmp_path))
    with store.scoped(b"a", name="same", suffix=".xlsx") as first:
        with store.scoped(b"b", name="same", suffix=".xlsx") as second:
            assert first != second
            assert first.read_bytes() == b"a"
    assert list(tmp_path.iterdir()) == []


def test_missing_directory_is_created(tmp_path):
    target = tmp_path / "nested" / "exports"
    TempFileStore(str(target))
    assert target.is_dir()
