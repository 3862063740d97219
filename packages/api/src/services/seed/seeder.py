# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Seeds applications and document requests for the demo residents so the
outstanding-requests view has something to show right after deployment:
an expired request, a still-valid one, one with a type missing from the
catalog, and closed requests that must stay hidden.

Simulated for demonstration purposes -- not real applicant data.
"""

import logging
from datetime import UTC, datetime

from db import Application, DocumentRequest
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import AGENT_KOCH_ID, APPLICATIONS, RESIDENT_IDS, compute_config_hash

logger = logging.getLogger(__name__)


async def _existing_application_ids(session: AsyncSession) -> list[int]:
    result = await session.execute(
        select(Application.id).where(Application.resident_id.in_(RESIDENT_IDS))
    )
    return list(result.scalars().all())


async def _clear_demo_data(session: AsyncSession, app_ids: list[int]) -> None:
    """Delete demo applications and their requests."""
    await session.execute(
        delete(DocumentRequest).where(DocumentRequest.application_id.in_(app_ids))
    )
    await session.execute(delete(Application).where(Application.id.in_(app_ids)))
    logger.info("Cleared %d existing demo applications", len(app_ids))


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed demo data. Returns summary dict.

    Args:
        session: Database session.
        force: If True, clear and re-seed even if already seeded.

    Returns:
        Summary dict with counts of seeded records, or an ``already_seeded``
        status when demo applications exist and ``force`` is False.
    """
    existing = await _existing_application_ids(session)
    if existing and not force:
        return {"status": "already_seeded", "applications": len(existing)}

    if existing:
        await _clear_demo_data(session, existing)

    now = datetime.now(UTC)
    request_count = 0

    for app_def in APPLICATIONS:
        application = Application(
            resident_id=app_def["resident_id"],
            status=app_def["status"],
            submitted_at=now - app_def["submitted_ago"],
        )
        session.add(application)
        await session.flush()  # Get application.id

        for req_def in app_def["document_requests"]:
            session.add(
                DocumentRequest(
                    token=req_def["token"],
                    application_id=application.id,
                    document_type_id=req_def["document_type_id"],
                    applicant_type=req_def["applicant_type"],
                    applicant_uuid=req_def.get("applicant_uuid"),
                    applicant_name=req_def.get("applicant_name"),
                    custom_message=req_def.get("custom_message"),
                    requested_by=AGENT_KOCH_ID,
                    status=req_def["status"],
                    requested_at=now - req_def["requested_ago"],
                    expires_at=now + req_def["expires_in"],
                )
            )
            request_count += 1

    await session.commit()

    summary = {"applications": len(APPLICATIONS), "document_requests": request_count}
    logger.info("Demo data seeded: %s", summary)

    return {
        "status": "seeded",
        "seeded_at": now.isoformat(),
        "config_hash": compute_config_hash(),
        **summary,
    }
