"""
Authentication and session use cases.

There is a single hardcoded admin account; a successful login stores a
Session in the user slot until an explicit logout. Sessions never expire.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from functools import lru_cache
import logging

from netflex.core.latency import Latency
from netflex.core.security import hash_password, verify_password
from netflex.domain.models import ApiResponse, Session
from netflex.repositories.base import StorageError
from netflex.repositories.session_repository import SessionRepository

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
SESSION_TOKEN = "mock-jwt-token-123"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
NOT_AUTHENTICATED_MESSAGE = "Not authenticated"


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


class NotAuthenticatedError(AuthError):
    pass


@lru_cache
def _admin_password_hash() -> str:
    return hash_password(ADMIN_PASSWORD)


@dataclass
class AuthService:
    """Handles login, logout and the current-session lookup."""

    sessions: SessionRepository
    latency: Latency = field(default_factory=Latency.from_settings)

    def _check_credentials(self, username: str, password: str) -> Session:
        if (username or "") != ADMIN_USERNAME or not verify_password(password or "", _admin_password_hash()):
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        return Session(username=username, token=SESSION_TOKEN)

    async def login(self, username: str, password: str) -> ApiResponse[Session]:
        await self.latency.wait("login")
        try:
            session = await asyncio.to_thread(self._check_credentials, username, password)
        except InvalidCredentialsError as exc:
            logger.info("Rejected login for %r", username)
            return ApiResponse[Session].fail(str(exc))
        try:
            await asyncio.to_thread(self.sessions.save, session)
        except StorageError:
            logger.exception("Could not persist session for %r", username)
            return ApiResponse[Session].fail("Login failed. Please try again.")
        logger.info("User %r logged in", username)
        return ApiResponse[Session].ok(session)

    def logout(self) -> None:
        self.sessions.clear()

    def get_current_session(self) -> Session | None:
        return self.sessions.load()

    def require_session(self) -> Session:
        session = self.get_current_session()
        if session is None:
            raise NotAuthenticatedError(NOT_AUTHENTICATED_MESSAGE)
        return session
