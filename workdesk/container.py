"""
===============================================================================
CRC CARD — workdesk/container.py (Composition Root / manual DI)
===============================================================================

Responsibilities:
  - Compose dependencies (repositories, exporters, mail, use cases) per DIP.
  - Expose factories for FastAPI (Depends).
  - Keep singletons cached (lru_cache) for stateful adapters.
  - Centralize runtime decisions based on Settings.

Collaborators:
  - workdesk.crosscutting.config.get_settings
  - workdesk.domain.* (ports)
  - workdesk.infrastructure.* (implementations)
  - workdesk.application.usecases.* (use cases)

Notes:
  - No business logic here.
  - No FastAPI imports; routers wrap these factories with Depends.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases.notes import (
    CreateNoteUseCase,
    DeleteNoteUseCase,
    GetNoteUseCase,
    ListNotesUseCase,
    UpdateNoteUseCase,
)
from .application.usecases.users import (
    CheckMobileExistsUseCase,
    ListUserMobilesUseCase,
    LogoutUseCase,
    RegisterUserUseCase,
)
from .application.usecases.work_hours import (
    AddWorkHoursUseCase,
    EditWorkHoursSummaryUseCase,
    ExportWorkHoursUseCase,
    ListWorkHoursUseCase,
    SendWorkHoursEmailUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import NoteRepository, UserRepository, WorkHoursRepository
from .domain.services import MailSender, ScratchFileStore, WorkHoursReportExporter
from .identity.auth_users import create_access_token
from .infrastructure.export import XlsxWorkHoursExporter
from .infrastructure.mail import FakeMailSender, SmtpMailSender
from .infrastructure.repositories.in_memory import (
    InMemoryNoteRepository,
    InMemoryUserRepository,
    InMemoryWorkHoursRepository,
)
from .infrastructure.repositories.postgres import (
    PostgresNoteRepository,
    PostgresUserRepository,
    PostgresWorkHoursRepository,
)
from .infrastructure.storage import TempFileStore

# =============================================================================
# Internal helpers
# =============================================================================


def _is_test_env() -> bool:
    """app_env in {"test", "testing", "ci"} => in-memory adapters."""
    return get_settings().is_test()


# =============================================================================
# Repositories (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_work_hours_repository() -> WorkHoursRepository:
    if _is_test_env():
        return InMemoryWorkHoursRepository()
    return PostgresWorkHoursRepository()


@lru_cache(maxsize=1)
def get_note_repository() -> NoteRepository:
    if _is_test_env():
        return InMemoryNoteRepository()
    return PostgresNoteRepository()


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    if _is_test_env():
        return InMemoryUserRepository()
    return PostgresUserRepository()


# =============================================================================
# Services (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_report_exporter() -> WorkHoursReportExporter:
    return XlsxWorkHoursExporter(get_work_hours_repository())


@lru_cache(maxsize=1)
def get_scratch_file_store() -> ScratchFileStore:
    return TempFileStore(get_settings().export_tmp_dir)


@lru_cache(maxsize=1)
def get_mail_sender() -> MailSender:
    """Fake sender in test env or with FAKE_MAIL; SMTP otherwise."""
    settings = get_settings()
    if settings.fake_mail or _is_test_env():
        return FakeMailSender()
    return SmtpMailSender(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_user,
        password=settings.smtp_password,
        start_tls=settings.smtp_start_tls,
        from_email=settings.mail_from,
        from_name=settings.mail_from_name,
    )


# =============================================================================
# Use cases: work hours
# =============================================================================


def get_add_work_hours_use_case() -> AddWorkHoursUseCase:
    return AddWorkHoursUseCase(get_work_hours_repository())


def get_list_work_hours_use_case() -> ListWorkHoursUseCase:
    return ListWorkHoursUseCase(get_work_hours_repository())


def get_edit_work_hours_summary_use_case() -> EditWorkHoursSummaryUseCase:
    return EditWorkHoursSummaryUseCase(get_work_hours_repository())


def get_export_work_hours_use_case() -> ExportWorkHoursUseCase:
    return ExportWorkHoursUseCase(get_report_exporter())


def get_send_work_hours_email_use_case() -> SendWorkHoursEmailUseCase:
    return SendWorkHoursEmailUseCase(
        users=get_user_repository(),
        exporter=get_report_exporter(),
        files=get_scratch_file_store(),
        mail_sender=get_mail_sender(),
        timeout_seconds=get_settings().mail_timeout_seconds,
    )


# =============================================================================
# Use cases: notes
# =============================================================================


def get_create_note_use_case() -> CreateNoteUseCase:
    return CreateNoteUseCase(get_note_repository())


def get_list_notes_use_case() -> ListNotesUseCase:
    return ListNotesUseCase(get_note_repository())


def get_get_note_use_case() -> GetNoteUseCase:
    return GetNoteUseCase(get_note_repository())


def get_update_note_use_case() -> UpdateNoteUseCase:
    return UpdateNoteUseCase(get_note_repository())


def get_delete_note_use_case() -> DeleteNoteUseCase:
    return DeleteNoteUseCase(get_note_repository())


# =============================================================================
# Use cases: users
# =============================================================================


def get_check_mobile_exists_use_case() -> CheckMobileExistsUseCase:
    return CheckMobileExistsUseCase(get_user_repository())


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(get_user_repository(), token_issuer=create_access_token)


def get_logout_use_case() -> LogoutUseCase:
    return LogoutUseCase(get_user_repository())


def get_list_user_mobiles_use_case() -> ListUserMobilesUseCase:
    return ListUserMobilesUseCase(get_user_repository())
