# This project was developed with assistance from AI tools.
"""
Förderportal -- domain models

Funding applications submitted by residents and the document requests the
reviewing authority issues against them.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import ApplicationStatus, DocumentRequestStatus


def _enum_values(enum_cls) -> list[str]:
    """Persist enum values (lowercase), not member names."""
    return [member.value for member in enum_cls]


class Application(Base):
    """Funding application owned by a resident (Keycloak identity)."""

    __tablename__ = "applications"
    __table_args__ = (
        Index("ix_applications_resident_submitted", "resident_id", "submitted_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    resident_id = Column(String(255), nullable=False, index=True)
    status = Column(
        Enum(
            ApplicationStatus,
            name="application_status",
            native_enum=False,
            values_callable=_enum_values,
        ),
        nullable=False,
        default=ApplicationStatus.DRAFT,
    )
    submitted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    document_requests = relationship(
        "DocumentRequest", back_populates="application", cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Application(id={self.id}, resident='{self.resident_id}')>"


class DocumentRequest(Base):
    """Request for a specific document, issued by an agent against an application.

    ``document_type_id`` is a key into the in-process document catalog,
    not a foreign key.
    """

    __tablename__ = "document_requests"
    __table_args__ = (
        Index("ix_document_requests_app_status", "application_id", "status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(64), unique=True, nullable=False)
    application_id = Column(
        Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    document_type_id = Column(String(100), nullable=False)
    applicant_type = Column(String(50), nullable=False, default="general")
    applicant_uuid = Column(String(36), nullable=True)
    applicant_name = Column(String(255), nullable=True)
    custom_message = Column(Text, nullable=True)
    requested_by = Column(String(255), nullable=True)
    status = Column(
        Enum(
            DocumentRequestStatus,
            name="document_request_status",
            native_enum=False,
            values_callable=_enum_values,
        ),
        nullable=False,
        default=DocumentRequestStatus.PENDING,
    )
    requested_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    application = relationship("Application", back_populates="document_requests")

    def __repr__(self):
        return f"<DocumentRequest(token='{self.token}', type='{self.document_type_id}')>"
