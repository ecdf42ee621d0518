"""Session gate in front of the admin views.

States
------
``loading``
    Created here; the session query has not resolved yet.  Only the
    neutral placeholder may render.
``authenticated``
    The provider confirmed the session.  Protected views render.
``unauthenticated``
    No token, or the provider rejected it.  Callers redirect to ``/login``.

A gate resolves exactly once; ``logout`` is the only transition out of
``authenticated``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

from portfolio.auth.provider import AuthProvider, Session
from portfolio.maintenance import LOGIN_PATH

T = TypeVar("T")


class GateState(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class AuthGate:
    def __init__(self, provider: AuthProvider, access_token: str | None) -> None:
        self._provider = provider
        self._access_token = access_token
        self.state = GateState.LOADING
        self.session: Session | None = None

    @property
    def has_session(self) -> bool:
        return self.state is GateState.AUTHENTICATED

    async def resolve(self) -> GateState:
        """Ask the provider for the session and settle on a terminal state."""
        if self.state is not GateState.LOADING:
            return self.state
        session = None
        if self._access_token:
            session = await self._provider.get_session(self._access_token)
        self.session = session
        self.state = GateState.AUTHENTICATED if session else GateState.UNAUTHENTICATED
        return self.state

    def render(
        self,
        protected: Callable[[], T],
        placeholder: Callable[[], T],
        redirect: Callable[[str], T],
    ) -> T:
        """Build exactly one of the three views for the current state.

        The factories are only called for the branch that renders, so
        protected content is never produced while loading.
        """
        if self.state is GateState.AUTHENTICATED:
            return protected()
        if self.state is GateState.UNAUTHENTICATED:
            return redirect(LOGIN_PATH)
        return placeholder()

    async def logout(self) -> None:
        """Destroy the session at the provider and drop to ``unauthenticated``."""
        token = self.session.access_token if self.session else self._access_token
        if token:
            await self._provider.sign_out(token)
        self.session = None
        self._access_token = None
        self.state = GateState.UNAUTHENTICATED
