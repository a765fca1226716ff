# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited session handles bound to a username."""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from itsdangerous import BadData, URLSafeSerializer

from bookreviews.domain.users.entities import SessionToken
from bookreviews.domain.users.repositories import SessionTokenRepository
from bookreviews.shared.logging import logger

Clock = Callable[[], datetime]

_SALT = "bookreviews.session"


def utc_now() -> datetime:
    return datetime.now(UTC)


class SessionAuthenticator:
    """Issues session tokens and resolves them back to a username.

    A token is the ``itsdangerous`` signature of ``{"sid", "sub"}``. The
    session id keys a server-side table that owns the expiry, so a token
    resolves only while its signature verifies, its row exists and
    ``now < expires_at``.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        sessions: SessionTokenRepository,
        ttl_seconds: int = 3600,
        clock: Clock = utc_now,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._serializer = URLSafeSerializer(secret_key, salt=_SALT)
        self._sessions = sessions
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    def issue(self, username: str) -> SessionToken:
        now = self._clock()
        self.purge_expired()

        session_id = secrets.token_urlsafe(24)
        token = self._serializer.dumps({"sid": session_id, "sub": username})
        if isinstance(token, bytes):
            token = token.decode("utf-8")
        session = SessionToken(
            session_id=session_id,
            username=username,
            token=token,
            issued_at=now,
            expires_at=now + self._ttl,
        )
        self._sessions.add(session)
        logger.info(
            f"session.issue: user={username} sid={session_id[:8]}… "
            f"exp={session.expires_at.isoformat()}"
        )
        return session

    def resolve(self, handle: str | None) -> str | None:
        if not handle:
            return None

        try:
            payload = self._serializer.loads(handle)
        except BadData:
            logger.warning("session.resolve: bad signature")
            return None

        if not isinstance(payload, dict):
            return None
        session_id = payload.get("sid")
        username = payload.get("sub")
        if not isinstance(session_id, str) or not isinstance(username, str):
            return None

        session = self._sessions.get(session_id)
        if session is None or session.username != username:
            logger.debug(f"session.resolve: unknown sid={session_id[:8]}…")
            return None

        if not session.is_active(self._clock()):
            self._sessions.discard(session_id)
            logger.debug(f"session.resolve: expired sid={session_id[:8]}… user={username}")
            return None

        return username

    def purge_expired(self) -> int:
        removed = self._sessions.purge_expired(self._clock())
        if removed:
            logger.debug(f"session.purge: removed={removed}")
        return removed


__all__ = ["Clock", "SessionAuthenticator", "utc_now"]
