# This project was developed with assistance from AI tools.
"""
SQLAdmin configuration for database administration UI

Access the admin panel at: http://localhost:8000/admin

Views are read-only: applications and document requests are created and
updated by the review workflow, never from this service.

When AUTH_DISABLED=false, requires admin credentials via login form.
When AUTH_DISABLED=true, admin panel is open (dev mode).
"""

from db import Application, DocumentRequest
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import create_engine
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings

# SQLAdmin requires a sync engine; derive from the async DATABASE_URL
_sync_url = settings.DATABASE_URL.replace("+asyncpg", "")
engine = create_engine(_sync_url, echo=False)


class AdminAuth(AuthenticationBackend):
    """Session-based auth gate for SQLAdmin.

    When AUTH_DISABLED=true, authenticate() always returns True (dev mode).
    Otherwise, requires login with SQLADMIN_USER / SQLADMIN_PASSWORD.
    """

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username")
        password = form.get("password")
        if username == settings.SQLADMIN_USER and password == settings.SQLADMIN_PASSWORD:
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.AUTH_DISABLED:
            return True
        return request.session.get("admin_authenticated", False)


class ApplicationAdmin(ModelView, model=Application):
    column_list = [
        Application.id,
        Application.resident_id,
        Application.status,
        Application.submitted_at,
        Application.created_at,
    ]
    column_searchable_list = [Application.resident_id]
    column_sortable_list = [Application.id, Application.status, Application.submitted_at]
    column_default_sort = [(Application.submitted_at, True)]
    can_create = False
    can_edit = False
    can_delete = False
    name = "Application"
    name_plural = "Applications"
    icon = "fa-solid fa-file-alt"


class DocumentRequestAdmin(ModelView, model=DocumentRequest):
    column_list = [
        DocumentRequest.token,
        DocumentRequest.application_id,
        DocumentRequest.document_type_id,
        DocumentRequest.applicant_name,
        DocumentRequest.status,
        DocumentRequest.requested_at,
        DocumentRequest.expires_at,
    ]
    column_searchable_list = [DocumentRequest.token, DocumentRequest.document_type_id]
    column_sortable_list = [
        DocumentRequest.application_id,
        DocumentRequest.status,
        DocumentRequest.requested_at,
        DocumentRequest.expires_at,
    ]
    column_default_sort = [(DocumentRequest.requested_at, True)]
    can_create = False
    can_edit = False
    can_delete = False
    name = "Document Request"
    name_plural = "Document Requests"
    icon = "fa-solid fa-file-circle-question"


def setup_admin(app):
    """Set up SQLAdmin and mount it to the FastAPI app."""
    auth_backend = AdminAuth(
        secret_key=settings.SQLADMIN_SECRET_KEY,
    )
    admin = Admin(app, engine, title="Förderportal Admin", authentication_backend=auth_backend)

    admin.add_view(ApplicationAdmin)
    admin.add_view(DocumentRequestAdmin)

    return admin
