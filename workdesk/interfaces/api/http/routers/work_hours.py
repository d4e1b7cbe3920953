"""
===============================================================================
CRC CARD — interfaces/api/http/routers/work_hours.py
===============================================================================

Module:
    Work Hours Router

Responsibilities:
    - Expose the work-hours endpoints (add, list, edit summary, export, email).
    - Convert requests into use-case inputs.
    - Translate WorkHoursError into envelopes.

Collaborators:
    - application.usecases.work_hours
    - identity.auth_users.require_user
    - container (DI factories)
    - schemas.work_hours (DTOs)
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from .....application.usecases.work_hours import (
    AddWorkHoursInput,
    AddWorkHoursUseCase,
    EditWorkHoursSummaryUseCase,
    ExportWorkHoursUseCase,
    ListWorkHoursUseCase,
    SendWorkHoursEmailInput,
    SendWorkHoursEmailUseCase,
)
from .....container import (
    get_add_work_hours_use_case,
    get_edit_work_hours_summary_use_case,
    get_export_work_hours_use_case,
    get_list_work_hours_use_case,
    get_send_work_hours_email_use_case,
)
from .....crosscutting.envelope import bad_request, envelope_response
from .....domain.entities import UserRecord
from .....domain.services import XLSX_MEDIA_TYPE
from .....identity.auth_users import require_user
from ..error_mapping import raise_work_hours_error
from ..schemas.common import parse_month
from ..schemas.work_hours import (
    AddWorkHoursReq,
    EditWorkHoursSummaryReq,
    ListWorkHoursReq,
    SendWorkHoursEmailReq,
)

router = APIRouter(tags=["work-hours"])

ADDED_MESSAGE = "Work Hours Successfully Add!"
FETCHED_MESSAGE = "Work Hours Successfully get!"
SENT_MESSAGE = "Work Hours sent Successfully!"


@router.post("/add-work-hours")
def add_work_hours(
    req: AddWorkHoursReq,
    user: UserRecord = Depends(require_user()),
    use_case: AddWorkHoursUseCase = Depends(get_add_work_hours_use_case),
):
    result = use_case.execute(
        AddWorkHoursInput(
            user_id=user.id,
            start_date_time=req.start_date_time,
            end_date_time=req.end_date_time,
            timezone=req.timezone,
            summary=req.summary,
        )
    )
    if result.error:
        raise_work_hours_error(result.error)
    return envelope_response(200, ADDED_MESSAGE, {"workHours": result.entry.to_dict()})


def _query_month(month: Optional[str]):
    try:
        return parse_month(month)
    except ValueError as exc:
        raise bad_request(str(exc)) from exc


def _list(user: UserRecord, use_case: ListWorkHoursUseCase, month):
    result = use_case.execute(user.id, month)
    return envelope_response(
        200, FETCHED_MESSAGE, {"workHours": [e.to_dict() for e in result.entries]}
    )


@router.post("/work-hours")
def list_work_hours(
    req: Optional[ListWorkHoursReq] = None,
    user: UserRecord = Depends(require_user()),
    use_case: ListWorkHoursUseCase = Depends(get_list_work_hours_use_case),
):
    return _list(user, use_case, req.target_month() if req else None)


@router.get("/work-hours")
def list_work_hours_get(
    month: Optional[str] = Query(default=None, description="YYYY-MM"),
    user: UserRecord = Depends(require_user()),
    use_case: ListWorkHoursUseCase = Depends(get_list_work_hours_use_case),
):
    return _list(user, use_case, _query_month(month))


@router.post("/edit-work-hours-summary")
def edit_work_hours_summary(
    req: EditWorkHoursSummaryReq,
    user: UserRecord = Depends(require_user()),
    use_case: EditWorkHoursSummaryUseCase = Depends(
        get_edit_work_hours_summary_use_case
    ),
):
    result = use_case.execute(req.id, req.summary, user_id=user.id)
    if result.error:
        raise_work_hours_error(result.error)
    return envelope_response(200, FETCHED_MESSAGE, {"workHours": result.entry.to_dict()})


@router.get("/work-hours-export")
def export_work_hours(
    month: Optional[str] = Query(default=None, description="YYYY-MM"),
    user: UserRecord = Depends(require_user()),
    use_case: ExportWorkHoursUseCase = Depends(get_export_work_hours_use_case),
):
    result = use_case.execute(user.id, _query_month(month))
    return Response(
        content=result.content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.post("/send-work-hours-email")
async def send_work_hours_email(
    req: SendWorkHoursEmailReq,
    user: UserRecord = Depends(require_user()),
    use_case: SendWorkHoursEmailUseCase = Depends(get_send_work_hours_email_use_case),
):
    result = await use_case.execute(
        SendWorkHoursEmailInput(
            sender_id=user.id,
            recipient_ids=req.id,
            month=req.target_month(),
            summary=req.summary,
        )
    )

    outcome = {
        "sent": result.sent,
        "failed": result.failed,
        "skipped": result.skipped,
        "no_email": result.no_email,
    }
    if result.error:
        raise_work_hours_error(result.error, outcome)
    if result.is_partial:
        return envelope_response(
            200,
            f"Work Hours sent to {len(result.sent)} of {result.attempted} recipients.",
            outcome,
        )
    return envelope_response(200, SENT_MESSAGE, outcome)
