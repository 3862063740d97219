# This project was developed with assistance from AI tools.
"""Outstanding document request resolution.

Locates the applicant's current application, fetches its pending document
requests (newest first), and enriches each one with catalog metadata and an
expiry flag computed against a single resolution-time clock reading.

Enrichment is a pure per-record mapping: it never reorders, never drops,
and takes ``now`` as an argument so results are reproducible in tests.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime

from db import DocumentRequest, DocumentRequestStatus
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.document_request import DocumentRequestRecord, EnrichedDocumentRequest
from .application import locate_current_application
from .catalog import get_document_description, get_document_title
from .retrieval import REQUESTS_UNAVAILABLE, RetrievalError, retrieval_guard

logger = logging.getLogger(__name__)

# No agent directory is consulted; every request is attributed to the
# reviewing authority. An agent-lookup collaborator would replace this.
REQUESTING_AGENT_NAME = "Bewilligungsbehörde"

_RECORD_COLUMNS = (
    DocumentRequest.token,
    DocumentRequest.document_type_id,
    DocumentRequest.applicant_type,
    DocumentRequest.applicant_uuid,
    DocumentRequest.applicant_name,
    DocumentRequest.custom_message,
    DocumentRequest.requested_by,
    DocumentRequest.requested_at,
    DocumentRequest.expires_at,
)


def _as_aware(value: datetime) -> datetime:
    """Treat naive timestamps from the store as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _record_from_row(row: Mapping) -> DocumentRequestRecord:
    return DocumentRequestRecord.model_validate(dict(row))


async def fetch_pending_requests(
    session: AsyncSession,
    application_id: int,
) -> list[DocumentRequestRecord]:
    """Return pending requests for an application, newest ``requested_at`` first.

    Raises:
        RetrievalError: If the query fails.
    """
    stmt = (
        select(*_RECORD_COLUMNS)
        .where(
            DocumentRequest.application_id == application_id,
            DocumentRequest.status == DocumentRequestStatus.PENDING,
        )
        .order_by(DocumentRequest.requested_at.desc(), DocumentRequest.id.desc())
    )
    async with retrieval_guard("fetch_document_requests", REQUESTS_UNAVAILABLE):
        result = await session.execute(stmt)
        rows = result.mappings().all()

    return [_record_from_row(row) for row in rows or []]


def is_expired(expires_at: datetime | None, now: datetime) -> bool:
    """True when ``expires_at`` lies strictly before ``now``.

    A request without a usable expiry date is never considered expired.
    """
    if expires_at is None:
        return False
    return _as_aware(expires_at) < _as_aware(now)


def enrich_request(record: DocumentRequestRecord, now: datetime) -> EnrichedDocumentRequest:
    """Attach display title/description, requester label, and expiry flag."""
    return EnrichedDocumentRequest(
        **record.model_dump(),
        document_title=get_document_title(record.document_type_id),
        document_description=get_document_description(record.document_type_id),
        requesting_agent_name=REQUESTING_AGENT_NAME,
        is_expired=is_expired(record.expires_at, now),
    )


def _placeholder_token(position: int, taken: set[str]) -> str:
    """Positional key for a record without a token, unused by any real token."""
    candidate = f"missing-token-{position}"
    suffix = 1
    while candidate in taken:
        candidate = f"missing-token-{position}-{suffix}"
        suffix += 1
    return candidate


def enrich_requests(
    records: Iterable[DocumentRequestRecord],
    now: datetime,
) -> list[EnrichedDocumentRequest]:
    """Enrich records in order, keeping list keys unique.

    A record without a token gets a positional placeholder key so it can
    still be rendered; placeholders never reuse a real token from the same
    list. Two records sharing a real token mean the store returned
    something inconsistent.

    Raises:
        RetrievalError: On a duplicated token.
    """
    records = list(records)
    taken: set[str] = set()
    for record in records:
        if not record.token:
            continue
        if record.token in taken:
            logger.error("Duplicate document request token %s", record.token)
            raise RetrievalError(
                REQUESTS_UNAVAILABLE,
                operation="fetch_document_requests",
            )
        taken.add(record.token)

    enriched: list[EnrichedDocumentRequest] = []
    for position, record in enumerate(records):
        if not record.token:
            logger.warning("Document request at position %d has no token", position)
            token = _placeholder_token(position, taken)
            taken.add(token)
            record = record.model_copy(update={"token": token})
        enriched.append(enrich_request(record, now))
    return enriched


async def resolve_requests_for_application(
    session: AsyncSession,
    application_id: int,
    *,
    now: datetime | None = None,
) -> list[EnrichedDocumentRequest]:
    """Fetch and enrich the pending requests of one application."""
    records = await fetch_pending_requests(session, application_id)
    resolved_at = now or datetime.now(UTC)
    return enrich_requests(records, resolved_at)


async def resolve_outstanding_requests(
    session: AsyncSession,
    applicant_id: str,
    *,
    now: datetime | None = None,
) -> list[EnrichedDocumentRequest]:
    """Return the applicant's outstanding document requests.

    Returns an empty list (without querying requests) when the applicant has
    no application. Never returns None.

    Raises:
        RetrievalError: If either store query fails; no partial list is returned.
    """
    application = await locate_current_application(session, applicant_id)
    if application is None:
        return []

    requests = await resolve_requests_for_application(session, application.id, now=now)
    logger.debug(
        "Resolved %d outstanding document requests for application %s",
        len(requests),
        application.id,
    )
    return requests
