"""
Integration tests for pls — run against a real Tautulli server.

Requires environment variables:
  PLEXPY_SERVER  — Tautulli base URL, e.g. http://tautulli.local:8181
  PLEXPY_KEY     — API key

Run: PLS_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from pls import Empty, Error, Plexpy, Render
from pls.models.activity import ActivityPayload
from pls.models.history import HistoryPayload

SKIP = not os.environ.get("PLS_INTEGRATION")
SERVER = os.environ.get("PLEXPY_SERVER", "")
KEY = os.environ.get("PLEXPY_KEY", "")

pytestmark = pytest.mark.skipif(SKIP, reason="PLS_INTEGRATION not set")


def make_client() -> Plexpy:
    return Plexpy(SERVER, KEY)


class TestActivity:
    def test_activity_decodes(self):
        with make_client() as client:
            outcome = client.get_activity()
        assert isinstance(outcome, (Render, Empty))
        if isinstance(outcome, Render):
            assert isinstance(outcome.payload, ActivityPayload)


class TestHistory:
    def test_history_respects_length(self):
        with make_client() as client:
            outcome = client.get_history(5)
        assert isinstance(outcome, Render)
        assert isinstance(outcome.payload, HistoryPayload)
        assert len(outcome.payload.history) <= 5


class TestBadKey:
    def test_invalid_key_is_reported_by_message(self):
        with Plexpy(SERVER, "not-a-real-key") as client:
            outcome = client.get_activity()
        assert isinstance(outcome, Error)
        assert outcome.message
