"""
Name: Database Pool and Postgres Repository Tests

Responsibilities:
  - Pool lifecycle (init, get, close)
  - Repositories translate driver errors into DatabaseError
  - Row mapping / parameters of the work-hours repository

Notes:
  - Offline: ConnectionPool is mocked, no real DB
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from workdesk.crosscutting.exceptions import DatabaseError
from workdesk.domain.value_objects import YearMonth
from workdesk.infrastructure.db.errors import (
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)
from workdesk.infrastructure.db.pool import close_pool, get_pool, init_pool
from workdesk.infrastructure.repositories.postgres import (
    PostgresNoteRepository,
    PostgresWorkHoursRepository,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clean_pool():
    close_pool()
    yield
    close_pool()


class TestPoolLifecycle:
    def test_init_get_close(self):
        with patch("workdesk.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            assert init_pool("postgresql://test", min_size=1, max_size=2) is mock_pool
            assert get_pool() is mock_pool

            close_pool()
            mock_pool.close.assert_called_once()

        with pytest.raises(PoolNotInitializedError):
            get_pool()

    def test_init_twice_raises(self):
        with patch("workdesk.infrastructure.db.pool.ConnectionPool"):
            init_pool("postgresql://test", min_size=1, max_size=2)
            with pytest.raises(PoolAlreadyInitializedError):
                init_pool("postgresql://test", min_size=1, max_size=2)

    def test_close_is_idempotent(self):
        close_pool()
        close_pool()


def _pool_returning(*, fetchall=None, fetchone=None):
    conn = MagicMock()
    cursor = conn.execute.return_value
    cursor.fetchall.return_value = fetchall or []
    cursor.fetchone.return_value = fetchone
    pool = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    return pool, conn


def test_work_hours_list_maps_rows_and_params():
    start = datetime(2024, 6, 1, 13, 45, tzinfo=timezone.utc)
    row = (7, 1, start, start, "Asia/Kolkata", "00h00min", "s", start, start, None)
    pool, conn = _pool_returning(fetchall=[row])

    entries = PostgresWorkHoursRepository(pool).list_entries_by_month(
        [1, 1, 2], YearMonth(2024, 6)
    )

    assert [e.id for e in entries] == [7]
    assert entries[0].timezone == "Asia/Kolkata"
    _, params = conn.execute.call_args.args
    assert params == ([1, 2], 2024, 6)


def test_work_hours_get_entry_missing_returns_none():
    pool, _ = _pool_returning(fetchone=None)
    assert PostgresWorkHoursRepository(pool).get_entry(5) is None


def test_driver_errors_become_database_error():
    pool = MagicMock()
    pool.connection.side_effect = RuntimeError("connection refused")

    with pytest.raises(DatabaseError):
        PostgresNoteRepository(pool).list_notes(1)
