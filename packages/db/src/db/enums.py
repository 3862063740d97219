# This project was developed with assistance from AI tools.
"""
Domain enums for the funding application portal.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class ApplicationStatus(str, enum.Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class DocumentRequestStatus(str, enum.Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    APPLICANT = "applicant"
    AGENT = "agent"
