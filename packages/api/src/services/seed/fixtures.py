# This project was developed with assistance from AI tools.
"""
Demo fixture data for the Förderportal.

All fixture data is defined as Python dicts so enums can be referenced directly.
Resident IDs are deterministic UUIDs matching the Keycloak realm export, so the
seeded applications link to the demo logins.

Timestamps are offsets from the seeding instant so that expired and
still-valid requests stay that way regardless of when the seed runs.

Simulated for demonstration purposes -- not real applicant data.
"""

import hashlib
import json
from datetime import timedelta

from db.enums import ApplicationStatus, DocumentRequestStatus

# ---------------------------------------------------------------------------
# Keycloak user references (deterministic UUIDs)
# ---------------------------------------------------------------------------

LENA_WEBER_ID = "5b0e7c1a-3f2d-4e8b-9a61-0c2d4f6a8b01"
TOBIAS_BRANDT_ID = "5b0e7c1a-3f2d-4e8b-9a61-0c2d4f6a8b02"
MIRA_OZTURK_ID = "5b0e7c1a-3f2d-4e8b-9a61-0c2d4f6a8b03"  # registered, no application yet
AGENT_KOCH_ID = "5b0e7c1a-3f2d-4e8b-9a61-0c2d4f6a8b10"

RESIDENT_IDS = [LENA_WEBER_ID, TOBIAS_BRANDT_ID, MIRA_OZTURK_ID]

# ---------------------------------------------------------------------------
# Applications with their document requests
# ---------------------------------------------------------------------------

APPLICATIONS: list[dict] = [
    # Lena's earlier, superseded application -- its pending request must not surface
    {
        "resident_id": LENA_WEBER_ID,
        "status": ApplicationStatus.REJECTED,
        "submitted_ago": timedelta(days=120),
        "document_requests": [
            {
                "token": "demo-lena-old-grundbuch",
                "document_type_id": "grundbuchblattkopie",
                "applicant_type": "general",
                "status": DocumentRequestStatus.PENDING,
                "requested_ago": timedelta(days=110),
                "expires_in": timedelta(days=-80),
            },
        ],
    },
    {
        "resident_id": LENA_WEBER_ID,
        "status": ApplicationStatus.IN_REVIEW,
        "submitted_ago": timedelta(days=20),
        "document_requests": [
            {
                "token": "demo-lena-meldebescheinigung",
                "document_type_id": "meldebescheinigung",
                "applicant_type": "general",
                "custom_message": "Bitte für alle Haushaltsmitglieder einreichen.",
                "status": DocumentRequestStatus.PENDING,
                "requested_ago": timedelta(days=2),
                "expires_in": timedelta(days=12),
            },
            {
                "token": "demo-lena-lohn",
                "document_type_id": "lohn_gehaltsbescheinigungen",
                "applicant_type": "hauptantragsteller",
                "applicant_name": "Lena Weber",
                "custom_message": "Die letzten drei Monate, bitte.",
                "status": DocumentRequestStatus.PENDING,
                "requested_ago": timedelta(days=16),
                "expires_in": timedelta(days=-2),
            },
            {
                "token": "demo-lena-photovoltaik",
                "document_type_id": "nachweis_photovoltaik",
                "applicant_type": "general",
                "status": DocumentRequestStatus.PENDING,
                "requested_ago": timedelta(days=5),
                "expires_in": timedelta(days=25),
            },
            {
                "token": "demo-lena-steuerbescheid",
                "document_type_id": "einkommenssteuerbescheid",
                "applicant_type": "hauptantragsteller",
                "applicant_name": "Lena Weber",
                "status": DocumentRequestStatus.FULFILLED,
                "requested_ago": timedelta(days=18),
                "expires_in": timedelta(days=10),
            },
            {
                "token": "demo-lena-heirat",
                "document_type_id": "marriage_cert",
                "applicant_type": "general",
                "status": DocumentRequestStatus.CANCELLED,
                "requested_ago": timedelta(days=17),
                "expires_in": timedelta(days=11),
            },
        ],
    },
    # Tobias: submitted, nothing outstanding
    {
        "resident_id": TOBIAS_BRANDT_ID,
        "status": ApplicationStatus.SUBMITTED,
        "submitted_ago": timedelta(days=3),
        "document_requests": [
            {
                "token": "demo-tobias-lageplan",
                "document_type_id": "lageplan",
                "applicant_type": "general",
                "status": DocumentRequestStatus.FULFILLED,
                "requested_ago": timedelta(days=2),
                "expires_in": timedelta(days=28),
            },
        ],
    },
]


def compute_config_hash() -> str:
    """Compute a SHA-256 hash of the fixture data for idempotency checks."""
    content = json.dumps(
        {
            "residents": RESIDENT_IDS,
            "applications": len(APPLICATIONS),
            "tokens": [r["token"] for a in APPLICATIONS for r in a["document_requests"]],
        },
        sort_keys=True,
    )
    return hashlib.sha256(content.encode()).hexdigest()
