from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

# Make the netflex package importable when running the tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netflex.core.latency import Latency  # noqa: E402
from netflex.repositories.base import USER_KEY, MemoryStore  # noqa: E402
from netflex.repositories.session_repository import SessionRepository  # noqa: E402
from netflex.services.auth_service import (  # noqa: E402
    INVALID_CREDENTIALS_MESSAGE,
    SESSION_TOKEN,
    AuthService,
    NotAuthenticatedError,
)


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def svc(store) -> AuthService:
    return AuthService(SessionRepository(store), Latency.disabled())


def test_login_with_admin_credentials_stores_session(svc):
    resp = asyncio.run(svc.login("admin", "admin123"))

    assert resp.success is True
    assert resp.data.username == "admin"
    assert resp.data.token == SESSION_TOKEN
    current = svc.get_current_session()
    assert current is not None
    assert current.username == "admin"


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("root", "admin123"), ("", ""), ("Admin", "admin123")])
def test_login_rejects_bad_credentials(svc, username, password):
    resp = asyncio.run(svc.login(username, password))

    assert resp.success is False
    assert resp.message == INVALID_CREDENTIALS_MESSAGE
    assert resp.data is None
    assert svc.get_current_session() is None


def test_failed_login_keeps_prior_session(svc):
    asyncio.run(svc.login("admin", "admin123"))

    resp = asyncio.run(svc.login("admin", "wrong"))

    assert resp.success is False
    assert svc.get_current_session().username == "admin"


def test_logout_always_clears(svc):
    svc.logout()
    assert svc.get_current_session() is None

    asyncio.run(svc.login("admin", "admin123"))
    svc.logout()
    svc.logout()
    assert svc.get_current_session() is None


def test_unreadable_session_slot_counts_as_logged_out(store, svc):
    store.set(USER_KEY, "{broken")
    assert svc.get_current_session() is None

    store.set(USER_KEY, '{"username": "admin"}')
    assert svc.get_current_session() is None


def test_require_session(svc):
    with pytest.raises(NotAuthenticatedError):
        svc.require_session()

    asyncio.run(svc.login("admin", "admin123"))
    assert svc.require_session().username == "admin"


def test_login_waits_for_login_delay(store):
    calls: list[str] = []

    class RecordingLatency(Latency):
        async def wait(self, operation: str) -> None:
            calls.append(operation)

    svc = AuthService(SessionRepository(store), RecordingLatency(scale=0.0))
    asyncio.run(svc.login("admin", "admin123"))
    asyncio.run(svc.login("admin", "wrong"))

    assert calls == ["login", "login"]
