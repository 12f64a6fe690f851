"""Shared test fixtures for Coldcall."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from coldcall.call_outcome import TranscriptTurn
from coldcall.call_script import AgentConfig, ProspectData


@pytest.fixture
def client():
    """Test client for the API app."""
    from coldcall.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def prospect():
    return ProspectData(
        first_name="Dana",
        company="Bright Smile Dental",
        observation="the site isn't mobile-friendly",
        industry="Dental",
    )


@pytest.fixture
def agent():
    return AgentConfig(agent_name="Alex", company_name="RenderWiseAI", callback_number="555-0100")


@pytest.fixture
def make_turns():
    """Build a transcript from (role, message) pairs."""
    def _make(*pairs):
        return [TranscriptTurn(role=role, message=message) for role, message in pairs]
    return _make
