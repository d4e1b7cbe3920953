"""
============================================================
CRC CARD — infrastructure/repositories/postgres/base.py
============================================================
Class: PostgresRepositoryBase

Responsibilities:
- Resolve the pool (injected for tests, global otherwise).
- Run parameterized statements with consistent error handling:
  log with logger.exception and raise DatabaseError.

Collaborators:
- infrastructure.db.pool.get_pool
- crosscutting.exceptions.DatabaseError
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger


class PostgresRepositoryBase:
    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def _fetchall(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def _execute(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> int:
        """Run a write without RETURNING; returns the affected row count."""
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).rowcount
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc
