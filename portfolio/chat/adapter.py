"""Single-turn chat against the Gemini ``generateContent`` endpoint.

``ChatAdapter.send_turn`` never raises: a missing API key yields a fixed
"not configured" reply without touching the network, and any failure
during the call is turned into a reply-shaped error string so the
conversation thread stays intact.

Conversation layout sent to the model::

    user  : <context block>
    model : <canned acknowledgement>
    ...prior history (user / ai -> user / model)...
    user  : <new message>
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from portfolio.chat.context import build_context_block
from portfolio.config import Settings, settings as default_settings
from portfolio.store.content import ContentService

logger = logging.getLogger(__name__)

NOT_CONFIGURED_REPLY = (
    "I'm sorry, but I haven't been configured with an API key yet. "
    "Please contact the administrator."
)
ACKNOWLEDGEMENT = "Understood. I am ready to answer questions about the portfolio owner."

# Internal role -> Gemini role
_ROLE_MAP = {"user": "user", "ai": "model"}


@dataclass
class ChatTurn:
    role: Literal["user", "ai"]
    text: str


class ChatCallError(Exception):
    """The model call failed; only ever caught inside :meth:`ChatAdapter.send_turn`."""


def _content(role: str, text: str) -> dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


def build_contents(
    context: str,
    history: list[ChatTurn],
    user_text: str,
) -> list[dict[str, Any]]:
    """Assemble the ordered ``contents`` array for ``generateContent``."""
    contents = [_content("user", context), _content("model", ACKNOWLEDGEMENT)]
    for turn in history:
        contents.append(_content(_ROLE_MAP.get(turn.role, "user"), turn.text))
    contents.append(_content("user", user_text))
    return contents


def _reply_text(body: dict[str, Any]) -> str:
    candidates = body.get("candidates") or []
    if not candidates:
        reason = (body.get("promptFeedback") or {}).get("blockReason")
        raise ChatCallError(f"No response candidates ({reason})" if reason else "No response candidates")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    if not text:
        raise ChatCallError("Empty response from model")
    return text


class ChatAdapter:
    def __init__(
        self,
        content: ContentService,
        client: httpx.AsyncClient | None = None,
        config: Settings | None = None,
    ) -> None:
        self._content = content
        self._client = client
        self._config = config or default_settings

    @property
    def configured(self) -> bool:
        return bool(self._config.gemini_api_key)

    async def build_context(self) -> str:
        """Fetch the current content and render the context block."""
        projects, certificates, site_settings = await asyncio.gather(
            self._content.get_projects(),
            self._content.get_certificates(),
            self._content.get_site_settings(),
        )
        return build_context_block(site_settings, projects, certificates)

    async def _generate(self, contents: list[dict[str, Any]]) -> str:
        url = (
            f"{self._config.gemini_base_url.rstrip('/')}"
            f"/models/{self._config.gemini_model}:generateContent"
        )
        headers = {"x-goog-api-key": self._config.gemini_api_key}
        payload = {"contents": contents}

        if self._client is not None:
            response = await self._client.post(url, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self._config.request_timeout) as client:
                response = await client.post(url, json=payload, headers=headers)

        if response.is_error:
            try:
                detail = response.json().get("error", {}).get("message")
            except ValueError:
                detail = None
            raise ChatCallError(detail or f"HTTP {response.status_code}")
        return _reply_text(response.json())

    async def send_turn(self, user_text: str, prior_history: list[ChatTurn]) -> str:
        """Send *user_text* after *prior_history* and return the model's reply."""
        if not self.configured:
            return NOT_CONFIGURED_REPLY

        try:
            context = await self.build_context()
            contents = build_contents(context, prior_history, user_text)
            return await self._generate(contents)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Error sending message to AI")
            reason = str(exc) or type(exc).__name__
            return f"Error: {reason}. Please try again later."
