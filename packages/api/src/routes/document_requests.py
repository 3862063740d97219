# This project was developed with assistance from AI tools.
"""Outstanding document request routes with RBAC enforcement."""

from db import get_db
from db.enums import UserRole
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..middleware.auth import CurrentUser, require_roles
from ..schemas.document_request import (
    DocumentTypeItem,
    DocumentTypeListResponse,
    EnrichedDocumentRequest,
    OutstandingRequestItem,
    OutstandingRequestListResponse,
)
from ..services.catalog import DocumentCategory, list_document_types
from ..services.document_request import resolve_outstanding_requests
from ..services.formatting import format_for_display
from ..services.retrieval import RetrievalError

router = APIRouter()


def _build_item(request: EnrichedDocumentRequest) -> OutstandingRequestItem:
    return OutstandingRequestItem(
        **request.model_dump(),
        requested_at_display=format_for_display(request.requested_at),
        expires_at_display=format_for_display(request.expires_at),
    )


async def _outstanding_response(
    session: AsyncSession,
    resident_id: str,
) -> OutstandingRequestListResponse:
    try:
        requests = await resolve_outstanding_requests(session, resident_id)
    except RetrievalError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message,
        ) from exc

    items = [_build_item(r) for r in requests]
    return OutstandingRequestListResponse(
        data=items,
        count=len(items),
        notice=settings.UPLOAD_NOTICE if items else None,
    )


@router.get(
    "/document-requests/outstanding",
    response_model=OutstandingRequestListResponse,
    dependencies=[Depends(require_roles(UserRole.APPLICANT, UserRole.ADMIN))],
)
async def list_my_outstanding_requests(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> OutstandingRequestListResponse:
    """Pending document requests on the caller's most recent application."""
    return await _outstanding_response(session, user.user_id)


@router.get(
    "/residents/{resident_id}/document-requests/outstanding",
    response_model=OutstandingRequestListResponse,
    dependencies=[Depends(require_roles(UserRole.AGENT, UserRole.ADMIN))],
)
async def list_resident_outstanding_requests(
    resident_id: str,
    session: AsyncSession = Depends(get_db),
) -> OutstandingRequestListResponse:
    """Same list as the applicant sees, for an agent looking up a resident."""
    return await _outstanding_response(session, resident_id)


@router.get("/document-types", response_model=DocumentTypeListResponse)
async def list_catalog(
    user: CurrentUser,
    category: DocumentCategory | None = None,
) -> DocumentTypeListResponse:
    """Static document type catalog, optionally filtered by category."""
    return DocumentTypeListResponse(
        data=[
            DocumentTypeItem(
                id=type_id,
                title=entry.title,
                description=entry.description,
                category=entry.category.value,
            )
            for type_id, entry in list_document_types(category)
        ]
    )
