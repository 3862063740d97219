# This project was developed with assistance from AI tools.
"""Tests for the demo data seeding service."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from db import Application, DocumentRequest
from db.enums import DocumentRequestStatus

from src.services.catalog import get_document_type
from src.services.seed.fixtures import (
    APPLICATIONS,
    LENA_WEBER_ID,
    MIRA_OZTURK_ID,
    RESIDENT_IDS,
    compute_config_hash,
)
from src.services.seed.seeder import seed_demo_data


def _all_requests():
    return [r for a in APPLICATIONS for r in a["document_requests"]]


def _seed_session(existing_ids: list[int]) -> AsyncMock:
    session = AsyncMock()
    result = MagicMock()
    result.scalars.return_value.all.return_value = existing_ids
    session.execute = AsyncMock(return_value=result)
    # session.add() is synchronous in SQLAlchemy
    session.add = MagicMock()
    return session


# ---------------------------------------------------------------------------
# Fixture data tests
# ---------------------------------------------------------------------------


def test_fixture_application_count():
    assert len(APPLICATIONS) == 3


def test_fixture_request_tokens_unique():
    tokens = [r["token"] for r in _all_requests()]
    assert len(tokens) == 7
    assert len(tokens) == len(set(tokens))


def test_fixture_resident_without_application():
    """One demo resident has no application, for the empty-list path."""
    owners = {a["resident_id"] for a in APPLICATIONS}
    assert MIRA_OZTURK_ID in RESIDENT_IDS
    assert MIRA_OZTURK_ID not in owners


def test_fixture_covers_expired_and_unknown_type():
    pending = [r for r in _all_requests() if r["status"] == DocumentRequestStatus.PENDING]
    assert any(r["expires_in"].total_seconds() < 0 for r in pending)
    assert any(r["expires_in"].total_seconds() > 0 for r in pending)
    assert any(get_document_type(r["document_type_id"]) is None for r in pending)


def test_fixture_latest_lena_application_is_newest():
    lena = [a for a in APPLICATIONS if a["resident_id"] == LENA_WEBER_ID]
    newest = min(lena, key=lambda a: a["submitted_ago"])
    tokens = {r["token"] for r in newest["document_requests"]}
    assert "demo-lena-meldebescheinigung" in tokens
    assert "demo-lena-old-grundbuch" not in tokens


def test_config_hash_is_stable():
    assert compute_config_hash() == compute_config_hash()
    assert len(compute_config_hash()) == 64


# ---------------------------------------------------------------------------
# Seeder tests
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_seed_skips_when_already_seeded():
    session = _seed_session([1, 2, 3])

    result = await seed_demo_data(session)

    assert result == {"status": "already_seeded", "applications": 3}
    session.add.assert_not_called()
    session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_seed_inserts_applications_and_requests():
    session = _seed_session([])

    result = await seed_demo_data(session)

    assert result["status"] == "seeded"
    assert result["applications"] == 3
    assert result["document_requests"] == 7
    assert result["config_hash"] == compute_config_hash()

    added = [call.args[0] for call in session.add.call_args_list]
    assert sum(isinstance(o, Application) for o in added) == 3
    assert sum(isinstance(o, DocumentRequest) for o in added) == 7
    assert session.flush.await_count == 3
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_seed_expiry_relative_to_seed_time():
    session = _seed_session([])

    await seed_demo_data(session)

    requests = {
        call.args[0].token: call.args[0]
        for call in session.add.call_args_list
        if isinstance(call.args[0], DocumentRequest)
    }
    lohn = requests["demo-lena-lohn"]
    assert lohn.expires_at < datetime.now(UTC)
    assert requests["demo-lena-meldebescheinigung"].expires_at > requests["demo-lena-lohn"].expires_at


@pytest.mark.asyncio
async def test_seed_force_clears_existing():
    session = _seed_session([4, 5])

    result = await seed_demo_data(session, force=True)

    assert result["status"] == "seeded"
    # select existing + two deletes
    assert session.execute.await_count == 3
    session.commit.assert_awaited_once()
