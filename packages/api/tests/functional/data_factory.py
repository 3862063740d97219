# This project was developed with assistance from AI tools.
"""Row factories for functional tests.

Rows are plain mappings shaped like the selected columns of the
``applications`` and ``document_requests`` queries.
"""

from datetime import UTC, datetime

from .personas import LENA_USER_ID


def make_lena_application() -> dict:
    return {
        "id": 101,
        "resident_id": LENA_USER_ID,
        "submitted_at": datetime(2026, 3, 2, 9, 30, tzinfo=UTC),
    }


def make_request_row(
    token: str,
    document_type_id: str = "meldebescheinigung",
    requested_at: str | datetime | None = "2026-03-05T08:07:00Z",
    expires_at: str | datetime | None = "2099-01-01T00:00:00Z",
    **overrides,
) -> dict:
    row = {
        "token": token,
        "document_type_id": document_type_id,
        "applicant_type": "general",
        "applicant_uuid": None,
        "applicant_name": None,
        "custom_message": None,
        "requested_by": "agent-koch",
        "requested_at": requested_at,
        "expires_at": expires_at,
    }
    row.update(overrides)
    return row


def make_lena_requests() -> list[dict]:
    """Newest first, as the store returns them."""
    return [
        make_request_row("tok-melde", "meldebescheinigung"),
        make_request_row(
            "tok-lohn",
            "lohn_gehaltsbescheinigungen",
            requested_at="2026-02-20T10:00:00Z",
            expires_at="2020-01-01T00:00:00Z",
            applicant_type="hauptantragsteller",
            applicant_name="Lena Weber",
            custom_message="Die letzten drei Monate, bitte.",
        ),
        make_request_row(
            "tok-pv",
            "nachweis_photovoltaik",
            requested_at="2026-02-10T10:00:00Z",
            expires_at=None,
        ),
    ]
