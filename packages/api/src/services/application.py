# This project was developed with assistance from AI tools.
"""Application lookup for the current applicant.

A resident may have submitted several applications over time; outstanding
document requests are always resolved against the most recent one.
"""

import logging

from db import Application
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.document_request import ApplicationSummary
from .retrieval import APPLICATION_UNAVAILABLE, RetrievalError, retrieval_guard

logger = logging.getLogger(__name__)


def _latest_application_stmt(applicant_id: str):
    """Most recent application first; unsubmitted drafts last, ties broken by id."""
    return (
        select(Application.id, Application.resident_id, Application.submitted_at)
        .where(Application.resident_id == applicant_id)
        .order_by(Application.submitted_at.desc().nulls_last(), Application.id.desc())
        .limit(1)
    )


async def locate_current_application(
    session: AsyncSession,
    applicant_id: str,
) -> ApplicationSummary | None:
    """Return the applicant's most recently submitted application.

    Returns None when the applicant has no application yet -- that is a
    normal state, not an error.

    Raises:
        ValueError: If ``applicant_id`` is empty.
        RetrievalError: If the store is unreachable or the row is malformed.
    """
    if not applicant_id:
        raise ValueError("applicant_id must be a non-empty identifier")

    async with retrieval_guard("locate_application", APPLICATION_UNAVAILABLE):
        result = await session.execute(_latest_application_stmt(applicant_id))
        row = result.mappings().first()

    if row is None:
        logger.info("No applications found for resident %s", applicant_id)
        return None

    if row.get("id") is None:
        logger.error("Application row without id for resident %s", applicant_id)
        raise RetrievalError(
            APPLICATION_UNAVAILABLE,
            operation="locate_application",
        )

    return ApplicationSummary(
        id=row["id"],
        resident_id=row.get("resident_id") or applicant_id,
        submitted_at=row.get("submitted_at"),
    )
