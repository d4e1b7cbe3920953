"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .notes import InMemoryNoteRepository
from .users import InMemoryUserRepository
from .work_hours import InMemoryWorkHoursRepository

__all__ = [
    "InMemoryWorkHoursRepository",
    "InMemoryNoteRepository",
    "InMemoryUserRepository",
]
