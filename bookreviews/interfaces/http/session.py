# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session handle extraction for Flask requests."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Request, g, request

from bookreviews.application.services.session_authenticator import SessionAuthenticator
from bookreviews.shared.errors import AuthenticationError
from bookreviews.shared.logging import logger

SESSION_COOKIE = "session_token"


def session_handle(req: Request) -> str:
    auth = req.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    return req.cookies.get(SESSION_COOKIE, "")


def session_required(authenticator: SessionAuthenticator):
    """Resolve the caller's session and pass the username to the view.

    Raises ``AuthenticationError`` before the view runs when the handle is
    missing, badly signed or expired.
    """

    def decorator(f: Callable):
        @wraps(f)
        def inner(*args, **kwargs):
            username = authenticator.resolve(session_handle(request))
            if username is None:
                logger.warning(
                    f"No valid session on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise AuthenticationError()

            g.username = username
            return f(*args, username=username, **kwargs)

        return inner

    return decorator


__all__ = ["SESSION_COOKIE", "session_handle", "session_required"]
