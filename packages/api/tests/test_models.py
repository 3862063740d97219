# This project was developed with assistance from AI tools.
"""
Domain model structure tests
"""

from db import Application, DocumentRequest
from db.enums import DocumentRequestStatus


def test_application_relationships():
    """Application should own its document requests."""
    rel_names = {r.key for r in Application.__mapper__.relationships}
    assert rel_names == {"document_requests"}


def test_document_request_relationships():
    rel_names = {r.key for r in DocumentRequest.__mapper__.relationships}
    assert rel_names == {"application"}


def test_application_ordering_columns():
    columns = Application.__table__.columns
    assert columns["resident_id"].index is True
    assert columns["submitted_at"].nullable is True


def test_document_request_token_unique():
    assert DocumentRequest.__table__.columns["token"].unique is True
    assert DocumentRequest.__table__.columns["token"].nullable is False


def test_document_type_is_not_foreign_key():
    """Type ids resolve against the in-process catalog, not a table."""
    assert not DocumentRequest.__table__.columns["document_type_id"].foreign_keys


def test_document_request_cascades_with_application():
    fk = next(iter(DocumentRequest.__table__.columns["application_id"].foreign_keys))
    assert fk.column.table.name == "applications"
    assert fk.ondelete == "CASCADE"


def test_request_status_values():
    assert {s.value for s in DocumentRequestStatus} == {"pending", "fulfilled", "cancelled", "expired"}
