"""Cookie sessions and the authorization gate for mutating endpoints."""

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from photo_share.domain.errors import InvalidCredentialsError, NotAuthenticatedError
from photo_share.domain.models import UserRecord
from photo_share.services.users import UserRepository

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Maps opaque session tokens to user ids."""

    def create(self, user_id: UUID) -> str:
        """Bind a new token to the user and return it."""

    def get(self, token: str) -> UUID | None:
        """Return the bound user id if the session is alive."""

    def destroy(self, token: str) -> None:
        """Forget the token. Unknown tokens are ignored."""


@dataclass
class _SessionEntry:
    user_id: UUID
    expires_at: datetime


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session store with a fixed TTL."""

    ttl_seconds: int = 86400
    _entries: dict[str, _SessionEntry] = field(default_factory=dict, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def create(self, user_id: UUID) -> str:
        """Bind a fresh random token to the user."""
        token = secrets.token_urlsafe(32)
        now = datetime.now(tz=UTC)
        expires_at = now + timedelta(seconds=self.ttl_seconds)
        with self._lock:
            self._evict_expired(now)
            self._entries[token] = _SessionEntry(user_id=user_id, expires_at=expires_at)
        return token

    def get(self, token: str) -> UUID | None:
        """Return the user id if the token exists and hasn't expired."""
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            if datetime.now(tz=UTC) >= entry.expires_at:
                self._entries.pop(token, None)
                return None
            return entry.user_id

    def destroy(self, token: str) -> None:
        """Drop the session for a token."""
        with self._lock:
            self._entries.pop(token, None)

    def _evict_expired(self, now: datetime) -> None:
        # Caller holds the lock.
        expired = [
            token for token, entry in self._entries.items() if now >= entry.expires_at
        ]
        for token in expired:
            del self._entries[token]


@dataclass
class SessionGate:
    """Login, logout and the authenticated-session guard."""

    user_repository: UserRepository
    store: SessionStore

    def login(self, login_name: str, password: str) -> tuple[str, UserRecord]:
        """Check credentials and return a new session token with the user."""
        user = self.user_repository.find_by_credentials(login_name, password)
        if user is None or not _credentials_match(user, login_name, password):
            raise InvalidCredentialsError("Invalid login name or password")
        token = self.store.create(user.id)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return token, user

    def bind(self, user_id: UUID) -> str:
        """Start a session for a user without a credential check."""
        return self.store.create(user_id)

    def logout(self, token: str | None) -> None:
        """Destroy the session; logging out twice is fine."""
        if token:
            self.store.destroy(token)

    def current_user_id(self, token: str | None) -> UUID | None:
        """Return the session's user id, or None when anonymous."""
        if not token:
            return None
        return self.store.get(token)

    def require_authenticated(self, token: str | None) -> UUID:
        """Return the session's user id or raise NotAuthenticatedError."""
        user_id = self.current_user_id(token)
        if user_id is None:
            raise NotAuthenticatedError("Login required")
        return user_id


def _credentials_match(user: UserRecord, login_name: str, password: str) -> bool:
    # Passwords are stored as given; compare in constant time.
    return secrets.compare_digest(
        user.login_name.encode(), login_name.encode()
    ) and secrets.compare_digest(user.password.encode(), password.encode())
