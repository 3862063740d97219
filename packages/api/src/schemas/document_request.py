# This project was developed with assistance from AI tools.
"""Schemas for applications, document requests, and the catalog listing."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..services.formatting import parse_timestamp


class ApplicationSummary(BaseModel):
    """The subset of an application the resolver needs."""

    model_config = ConfigDict(frozen=True)

    id: int
    resident_id: str
    submitted_at: datetime | None = None


class DocumentRequestRecord(BaseModel):
    """Pending document request as retrieved from the store.

    Validation is lenient: upstream rows with missing or null fields are
    accepted with empty-string defaults, and unparseable timestamps become
    None, so a partial record is still shown rather than dropped.
    """

    model_config = ConfigDict(frozen=True)

    token: str = ""
    document_type_id: str = ""
    applicant_type: str = ""
    applicant_uuid: str | None = None
    applicant_name: str = ""
    custom_message: str = ""
    requested_by: str = ""
    requested_at: datetime | None = None
    expires_at: datetime | None = None

    @field_validator(
        "token",
        "document_type_id",
        "applicant_type",
        "applicant_name",
        "custom_message",
        "requested_by",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("applicant_uuid", mode="before")
    @classmethod
    def uuid_to_str(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("requested_at", "expires_at", mode="before")
    @classmethod
    def lenient_timestamp(cls, value: Any) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return parse_timestamp(value)
        return None


class EnrichedDocumentRequest(DocumentRequestRecord):
    """Document request with display metadata and the expiry flag."""

    document_title: str
    document_description: str
    requesting_agent_name: str
    is_expired: bool


class OutstandingRequestItem(EnrichedDocumentRequest):
    """Single outstanding request in an API response."""

    requested_at_display: str
    expires_at_display: str


class OutstandingRequestListResponse(BaseModel):
    """Response for the outstanding document request endpoints.

    An empty ``data`` list means nothing is outstanding. ``notice`` carries the
    upload hint and is only set when there is something to upload.
    """

    data: list[OutstandingRequestItem]
    count: int
    notice: str | None = None


class DocumentTypeItem(BaseModel):
    """Single catalog entry."""

    id: str
    title: str
    description: str
    category: str


class DocumentTypeListResponse(BaseModel):
    """Response for GET /document-types."""

    data: list[DocumentTypeItem]
