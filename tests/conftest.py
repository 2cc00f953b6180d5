"""Pytest fixtures: a TestClient and a fake upstream session."""

import pytest
from fastapi.testclient import TestClient

from kadastro.core import upstream
from kadastro.main import app


class DummyResponse:
    def __init__(self, status_code=200, body=b"", url="http://upstream.test/", headers=None, fail_with=None):
        self.status_code = status_code
        self.body = body
        self.url = url
        self.headers = headers or {"Content-Type": "application/json"}
        self.fail_with = fail_with
        self.closed = False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]
        # Connection dropped after part of the body
        if self.fail_with is not None:
            raise self.fail_with

    def close(self):
        self.closed = True


class DummySession:
    """Stands in for requests.Session; answers with queued outcomes."""

    def __init__(self):
        self.calls = []
        self.outcomes = []

    def answer(self, *outcomes):
        self.outcomes.extend(outcomes)
        return self

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        outcome.url = url
        return outcome


@pytest.fixture
def fake_upstream(monkeypatch):
    session = DummySession()
    monkeypatch.setattr(upstream, "get_session", lambda: session)
    return session


@pytest.fixture
def client():
    return TestClient(app)
