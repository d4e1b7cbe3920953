"""
Name: Work Hours Endpoint Tests

Responsibilities:
  - Envelope shape and messages of the work-hours endpoints
  - Validation errors as 400 envelopes on an HTTP 200 transport
  - Download and email flows through the container wiring
"""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from workdesk import container
from workdesk.api.main import app
from workdesk.application.usecases.work_hours import SendWorkHoursEmailUseCase
from workdesk.domain.services import XLSX_MEDIA_TYPE
from workdesk.infrastructure.mail import FakeMailSender

pytestmark = [pytest.mark.unit, pytest.mark.api]

ENTRY = {
    "start_date_time": "2024-06-01 19:15:00",
    "end_date_time": "2024-06-01 21:15:00",
    "timezone": "Asia/Kolkata",
    "summary": "Sprint review",
}


def _add(client, headers, **overrides):
    return client.post(
        "/api/v1/add-work-hours", json={**ENTRY, **overrides}, headers=headers
    )


def test_requires_bearer_token(client):
    res = _add(client, {})
    assert res.status_code == 200
    assert res.json() == {
        "status_code": 401,
        "message": "Unauthenticated.",
        "data": None,
    }


def test_add_work_hours(client, auth_headers):
    res = _add(client, auth_headers)

    body = res.json()
    assert body["status_code"] == 200
    assert body["message"] == "Work Hours Successfully Add!"
    entry = body["data"]["workHours"]
    assert entry["total_hours"] == "02h00min"
    assert entry["start_date_time"] == "2024-06-01 19:15:00"
    assert entry["timezone"] == "Asia/Kolkata"


@pytest.mark.parametrize(
    "payload,message",
    [
        ({"timezone": ""}, "Timezone is required."),
        (
            {"start_date_time": None},
            "Start Date Time: Input should be a valid string.",
        ),
        (
            {"end_date_time": "2024-06-01 18:00:00"},
            "End Date Time must not be earlier than Start Date Time.",
        ),
    ],
)
def test_add_work_hours_validation(client, auth_headers, payload, message):
    body = _add(client, auth_headers, **payload).json()
    assert body["status_code"] == 400
    assert body["message"] == message


def test_missing_field_is_required_message(client, auth_headers):
    payload = {k: v for k, v in ENTRY.items() if k != "end_date_time"}
    body = client.post(
        "/api/v1/add-work-hours", json=payload, headers=auth_headers
    ).json()
    assert body == {
        "status_code": 400,
        "message": "End Date Time is required.",
        "data": None,
    }


def test_list_work_hours_post_and_get(client, auth_headers):
    first = _add(client, auth_headers).json()["data"]["workHours"]["id"]
    second = _add(
        client,
        auth_headers,
        start_date_time="2024-06-02 09:00:00",
        end_date_time="2024-06-02 10:00:00",
    ).json()["data"]["workHours"]["id"]
    _add(
        client,
        auth_headers,
        start_date_time="2024-05-02 09:00:00",
        end_date_time="2024-05-02 10:00:00",
    )

    posted = client.post(
        "/api/v1/work-hours", json={"month": "2024-06"}, headers=auth_headers
    ).json()
    fetched = client.get(
        "/api/v1/work-hours", params={"month": "2024-06"}, headers=auth_headers
    ).json()

    assert posted["message"] == "Work Hours Successfully get!"
    assert [e["id"] for e in posted["data"]["workHours"]] == [second, first]
    assert fetched["data"] == posted["data"]


def test_list_work_hours_bad_month(client, auth_headers):
    posted = client.post(
        "/api/v1/work-hours", json={"month": "June"}, headers=auth_headers
    ).json()
    fetched = client.get(
        "/api/v1/work-hours", params={"month": "2024-13"}, headers=auth_headers
    ).json()

    for body in (posted, fetched):
        assert body["status_code"] == 400
        assert body["message"] == "Month must use the YYYY-MM format."


def test_edit_summary(client, auth_headers):
    entry_id = _add(client, auth_headers).json()["data"]["workHours"]["id"]

    body = client.post(
        "/api/v1/edit-work-hours-summary",
        json={"id": entry_id, "summary": "Updated"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 200
    assert body["data"]["workHours"]["summary"] == "Updated"
    assert body["data"]["workHours"]["total_hours"] == "02h00min"


def test_edit_summary_not_found(client, auth_headers):
    body = client.post(
        "/api/v1/edit-work-hours-summary",
        json={"id": 404, "summary": "x"},
        headers=auth_headers,
    ).json()
    assert body == {
        "status_code": 400,
        "message": "Work Hours Not Found!",
        "data": None,
    }


def test_export_download(client, auth_headers):
    _add(client, auth_headers)

    res = client.get(
        "/api/v1/work-hours-export", params={"month": "2024-06"}, headers=auth_headers
    )

    assert res.status_code == 200
    assert res.headers["content-type"] == XLSX_MEDIA_TYPE
    assert 'filename="Work_Hours_2024-06.xlsx"' in res.headers["content-disposition"]
    ws = load_workbook(BytesIO(res.content)).active
    assert ws["E2"].value == "Sprint review"


def test_send_email_to_resolvable_recipients(
    client, auth_headers, users, make_user, tmp_path
):
    _add(client, auth_headers)
    boss = make_user(users, mobile="9000000002", email="boss@example.com")

    body = client.post(
        "/api/v1/send-work-hours-email",
        json={"id": f"{boss.id},999,abc", "month": "2024-06"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 200
    assert body["message"] == "Work Hours sent Successfully!"
    assert body["data"]["sent"] == [boss.id]

    mail = container.get_mail_sender()
    assert [m.to for m in mail.sent] == ["boss@example.com"]
    assert mail.sent[0].attachments[0].filename == "Work_Hours_2024-06.xlsx"

    export_dir = tmp_path / "exports"
    assert list(export_dir.iterdir()) == []


def test_send_email_accepts_single_numeric_id(client, auth_headers, users, make_user):
    boss = make_user(users, mobile="9000000002", email="boss@example.com")

    body = client.post(
        "/api/v1/send-work-hours-email",
        json={"id": boss.id, "month": "2024-06"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 200


def test_send_email_without_valid_recipients(client, auth_headers, tmp_path):
    body = client.post(
        "/api/v1/send-work-hours-email",
        json={"id": "998,999", "month": "2024-06"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 400
    assert body["message"] == "No valid recipients found."
    assert container.get_mail_sender().sent == []
    assert list((tmp_path / "exports").iterdir()) == []


def test_send_email_to_user_without_email_is_not_rejected(
    client, auth_headers, users, make_user
):
    mailless = make_user(users, mobile="9000000002")

    body = client.post(
        "/api/v1/send-work-hours-email",
        json={"id": str(mailless.id), "month": "2024-06"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 200
    assert body["data"]["no_email"] == [mailless.id]
    assert container.get_mail_sender().sent == []


def test_send_email_partial_failure(client, auth_headers, users, make_user):
    ok = make_user(users, mobile="9000000002", email="ok@example.com")
    bad = make_user(users, mobile="9000000003", email="bounce@example.com")
    bouncing = SendWorkHoursEmailUseCase(
        users=users,
        exporter=container.get_report_exporter(),
        files=container.get_scratch_file_store(),
        mail_sender=FakeMailSender(failing_addresses=["bounce@example.com"]),
    )
    app.dependency_overrides[container.get_send_work_hours_email_use_case] = (
        lambda: bouncing
    )

    body = client.post(
        "/api/v1/send-work-hours-email",
        json={"id": f"{ok.id},{bad.id}", "month": "2024-06"},
        headers=auth_headers,
    ).json()

    assert body["status_code"] == 200
    assert body["message"] == "Work Hours sent to 1 of 2 recipients."
    assert body["data"]["failed"] == [bad.id]


def test_send_email_requires_month(client, auth_headers):
    body = client.post(
        "/api/v1/send-work-hours-email", json={"id": "1"}, headers=auth_headers
    ).json()
    assert body["status_code"] == 400
    assert body["message"] == "Month is required."
