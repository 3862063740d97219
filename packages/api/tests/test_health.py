# This project was developed with assistance from AI tools.
"""Tests for liveness and readiness endpoints."""

from unittest.mock import AsyncMock

from db import get_db
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.routes.health import router


def _make_app(session: AsyncMock) -> FastAPI:
    app = FastAPI()
    app.include_router(router, prefix="/health")

    async def fake_db():
        yield session

    app.dependency_overrides[get_db] = fake_db
    return app


def test_liveness():
    client = TestClient(_make_app(AsyncMock()))
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_ready_when_store_answers():
    session = AsyncMock()
    resp = TestClient(_make_app(session)).get("/health/ready")
    assert resp.status_code == 200
    session.execute.assert_awaited_once()


def test_not_ready_when_store_fails():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    resp = TestClient(_make_app(session)).get("/health/ready")
    assert resp.status_code == 503
    assert resp.json() == {"status": "unavailable"}
