"""Auth provider adapters.

``SupabaseAuthProvider`` speaks to the GoTrue endpoints of the Supabase
project:

    POST /auth/v1/token?grant_type=password   email + password sign-in
    GET  /auth/v1/user                        current-session query
    POST /auth/v1/logout                      sign-out

``DemoAuthProvider`` is used when the store is unconfigured: there are no
sessions and every sign-in is refused.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from portfolio.config import Settings, settings as default_settings
from portfolio.errors import AuthError

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """An authenticated admin session issued by the provider."""

    access_token: str
    email: str | None = None
    expires_at: int | None = None


class AuthProvider(ABC):
    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Session:
        """Exchange credentials for a session; raise :class:`AuthError` on rejection."""

    @abstractmethod
    async def get_session(self, access_token: str) -> Session | None:
        """Return the live session behind *access_token*, or ``None``."""

    @abstractmethod
    async def sign_out(self, access_token: str) -> None: ...


class DemoAuthProvider(AuthProvider):
    async def sign_in(self, email: str, password: str) -> Session:
        raise AuthError("Authentication is not configured.")

    async def get_session(self, access_token: str) -> Session | None:
        return None

    async def sign_out(self, access_token: str) -> None:
        return None


class SupabaseAuthProvider(AuthProvider):
    def __init__(self, client: httpx.AsyncClient, base_url: str, anon_key: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {access_token or self._anon_key}",
        }

    async def sign_in(self, email: str, password: str) -> Session:
        try:
            response = await self._client.post(
                f"{self._base_url}/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                headers=self._headers(),
            )
        except httpx.HTTPError as exc:
            raise AuthError(f"Failed to login: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error:
            message = (
                body.get("error_description")
                or body.get("msg")
                or body.get("message")
                or "Failed to login"
            )
            raise AuthError(str(message))

        if not body.get("access_token"):
            raise AuthError("Failed to login")

        expires_at = body.get("expires_at")
        if expires_at is None and body.get("expires_in"):
            expires_at = int(time.time()) + int(body["expires_in"])
        user = body.get("user") or {}
        logger.info("Admin signed in: %s", user.get("email", email))
        return Session(
            access_token=body["access_token"],
            email=user.get("email", email),
            expires_at=expires_at,
        )

    async def get_session(self, access_token: str) -> Session | None:
        try:
            response = await self._client.get(
                f"{self._base_url}/auth/v1/user",
                headers=self._headers(access_token),
            )
        except httpx.HTTPError as exc:
            logger.warning("Session lookup failed: %s", exc)
            return None
        if response.is_error:
            return None
        try:
            user = response.json()
        except ValueError:
            logger.warning("Session lookup returned a non-JSON body")
            return None
        if not isinstance(user, dict):
            return None
        return Session(access_token=access_token, email=user.get("email"))

    async def sign_out(self, access_token: str) -> None:
        try:
            response = await self._client.post(
                f"{self._base_url}/auth/v1/logout",
                headers=self._headers(access_token),
            )
        except httpx.HTTPError as exc:
            logger.warning("Sign-out request failed: %s", exc)
            return
        if response.is_error:
            logger.warning("Sign-out rejected with HTTP %d", response.status_code)


def select_auth_provider(
    client: httpx.AsyncClient | None,
    config: Settings | None = None,
) -> AuthProvider:
    """Supabase auth when the store is configured, the demo provider otherwise."""
    config = config or default_settings
    if not config.store_configured or client is None:
        return DemoAuthProvider()
    return SupabaseAuthProvider(client, config.supabase_url, config.supabase_anon_key)
