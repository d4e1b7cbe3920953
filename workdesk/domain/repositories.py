"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the domain layer (ports).
- Keep application/domain independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: WorkHourEntry, Note, UserRecord, UserOtp, DeviceToken
- domain.value_objects: YearMonth
- infrastructure.repositories: postgres/*, in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.

Notes
- typing.Protocol for structural subtyping.
- Outputs are concrete lists for predictable iteration/serialization.
- Soft-deleted rows are invisible to every read method.
"""

from typing import List, Optional, Protocol, Sequence

from .entities import DeviceToken, Note, UserOtp, UserRecord, WorkHourEntry
from .value_objects import YearMonth


class WorkHoursRepository(Protocol):
    """
    R: Interface for work-hour entry persistence.

    Implementations must provide:
      - Creation with server-assigned id and created_at
      - Month listing for one or many owners
      - Summary-only updates (duration and instants are immutable)
    """

    def create_entry(self, entry: WorkHourEntry) -> WorkHourEntry:
        """R: Persist a new entry and return it with id/created_at set."""
        ...

    def list_entries_by_month(
        self, user_ids: Sequence[int], month: YearMonth
    ) -> List[WorkHourEntry]:
        """
        R: Entries of the given owners whose start falls in month.

        Implementations MUST:
            - Measure the month in the entry's own timezone
            - Exclude soft-deleted entries
            - Order by id descending
            - Return [] for an empty user_ids
        """
        ...

    def get_entry(self, entry_id: int) -> Optional[WorkHourEntry]:
        """R: Fetch an entry by id (None when missing or deleted)."""
        ...

    def update_summary(
        self, entry_id: int, summary: Optional[str]
    ) -> Optional[WorkHourEntry]:
        """R: Overwrite the summary only; None when the entry does not exist."""
        ...


class NoteRepository(Protocol):
    """R: Interface for personal note persistence."""

    def create_note(self, note: Note) -> Note:
        ...

    def list_notes(self, user_id: int) -> List[Note]:
        """R: Notes of one owner ordered by id ascending."""
        ...

    def get_note(self, note_id: int) -> Optional[Note]:
        ...

    def update_note(
        self, note_id: int, *, title: str, description: Optional[str]
    ) -> Optional[Note]:
        ...

    def delete_note(self, note_id: int) -> Optional[Note]:
        """R: Soft delete; returns the deleted note or None when missing."""
        ...


class UserRepository(Protocol):
    """
    R: Interface for accounts plus their OTP and device-token side tables.

    Notes:
        - OTPs and device tokens only exist in relation to a mobile/user, so
          they live on the same port.
    """

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        ...

    def get_user_by_mobile(
        self, country_code: str, mobile: str
    ) -> Optional[UserRecord]:
        ...

    def create_user(self, user: UserRecord) -> UserRecord:
        ...

    def list_active_user_mobiles(self) -> List[UserRecord]:
        """R: Active users with role User, ordered by id ascending."""
        ...

    def find_active_otp(
        self, country_code: str, mobile: str, otp: str
    ) -> Optional[UserOtp]:
        ...

    def consume_otp(self, otp_id: int) -> None:
        """R: Mark the OTP Inactive so it cannot be reused."""
        ...

    def add_device_token(self, token: DeviceToken) -> DeviceToken:
        ...

    def delete_device_token(self, user_id: int, token: str) -> bool:
        """R: Hard delete; True when a row was removed."""
        ...
