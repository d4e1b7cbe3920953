"""
PostgreSQL Repository Implementations.

Raw parameterized SQL over the psycopg connection pool.
"""

from .notes import PostgresNoteRepository
from .users import PostgresUserRepository
from .work_hours import PostgresWorkHoursRepository

__all__ = [
    "PostgresWorkHoursRepository",
    "PostgresNoteRepository",
    "PostgresUserRepository",
]
