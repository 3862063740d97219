# This project was developed with assistance from AI tools.
"""Persona factories for functional tests.

Fixed user IDs ensure cross-test consistency.
"""

from db.enums import UserRole

from src.schemas.auth import UserContext

# Fixed IDs for cross-test referencing
LENA_USER_ID = "lena-weber-001"
MIRA_USER_ID = "mira-ozturk-003"
AGENT_USER_ID = "agent-koch"
ADMIN_USER_ID = "admin-user"


def applicant_lena() -> UserContext:
    return UserContext(
        user_id=LENA_USER_ID,
        role=UserRole.APPLICANT,
        email="lena@example.de",
        name="Lena Weber",
    )


def applicant_mira() -> UserContext:
    """Registered applicant who has not submitted anything yet."""
    return UserContext(
        user_id=MIRA_USER_ID,
        role=UserRole.APPLICANT,
        email="mira@example.de",
        name="Mira Öztürk",
    )


def agent() -> UserContext:
    return UserContext(
        user_id=AGENT_USER_ID,
        role=UserRole.AGENT,
        email="koch@foerderportal.local",
        name="Sachbearbeitung Koch",
    )


def admin() -> UserContext:
    return UserContext(
        user_id=ADMIN_USER_ID,
        role=UserRole.ADMIN,
        email="admin@foerderportal.local",
        name="Admin",
    )
