"""Portfolio chat assistant package."""

from portfolio.chat.adapter import ChatAdapter, ChatTurn, NOT_CONFIGURED_REPLY
from portfolio.chat.context import build_context_block
from portfolio.chat.session import ChatSession

__all__ = [
    "ChatAdapter",
    "ChatTurn",
    "NOT_CONFIGURED_REPLY",
    "build_context_block",
    "ChatSession",
]
