# This project was developed with assistance from AI tools.
"""Database connection tests (requires running PostgreSQL)."""

import pytest
from sqlalchemy import text

from db.database import engine

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_database_connection():
    """Test database connection."""
    async with engine.begin() as conn:
        result = await conn.execute(text("SELECT 1"))
        assert result.scalar() == 1


@pytest.mark.asyncio
async def test_document_requests_table_exists():
    """Migrations have created the document_requests table."""
    async with engine.begin() as conn:
        result = await conn.execute(
            text("SELECT to_regclass('public.document_requests') IS NOT NULL")
        )
        assert result.scalar() is True
