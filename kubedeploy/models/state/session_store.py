"""Process-wide session holder."""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubedeploy.models.core.user_info import Session, User

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns the current :class:`Session`.

    This is the only writer of session state: login/signup call
    :meth:`start`, logout and authorization failures call :meth:`clear`.
    Everything else reads :attr:`token`.
    """

    def __init__(self, session: Session | None = None) -> None:
        self._session = session
        self._listeners: list[Callable[[Session | None], None]] = []

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def user(self) -> User | None:
        return self._session.user if self._session else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def add_listener(self, listener: Callable[[Session | None], None]) -> None:
        self._listeners.append(listener)

    def start(self, session: Session) -> None:
        """Install a new session."""
        self._session = session
        logger.info("Session started for %s", session.user.username or session.user.email)
        self._notify()

    def clear(self) -> None:
        """Drop the current session, if any."""
        if self._session is None:
            return
        logger.info("Session cleared")
        self._session = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._session)
