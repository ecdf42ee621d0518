"""Process-local conversation history for one chat widget / terminal session."""

from __future__ import annotations

from dataclasses import dataclass, field

from portfolio.chat.adapter import ChatAdapter, ChatTurn

GREETING = "Hello! How can I help you with this portfolio?"


@dataclass
class ChatSession:
    """Keeps the turns of one conversation in memory; nothing is persisted."""

    adapter: ChatAdapter
    history: list[ChatTurn] = field(
        default_factory=lambda: [ChatTurn(role="ai", text=GREETING)]
    )

    async def ask(self, text: str) -> str:
        reply = await self.adapter.send_turn(text, list(self.history))
        self.history.append(ChatTurn(role="user", text=text))
        self.history.append(ChatTurn(role="ai", text=reply))
        return reply

    def reset(self) -> None:
        self.history = [ChatTurn(role="ai", text=GREETING)]
