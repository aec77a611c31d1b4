from unittest.mock import MagicMock

import pytest


def make_response(payload=None, status=200, text=None):
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    resp.text = text if text is not None else str(payload)
    return resp

@pytest.fixture
def fake_response():
    return make_response

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep real environment/config out of settings tests."""
    for name in ("APP_ENV", "NODE_ENV", "DATABASE_URL", "DATABASE_VERIFY_TLS", "DATABASE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
