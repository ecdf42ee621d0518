"""Chat assistant endpoint.

Routes
------
POST /api/chat    {"message": "...", "history": [{"role": "user"|"ai", "text": "..."}]}

The client owns the conversation history and sends it with every turn;
the server keeps nothing between requests.  The reply is always 200: model
failures come back as an error sentence in ``reply``.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from portfolio.api.deps import SiteContext, SiteView, get_site, open_site
from portfolio.chat.adapter import ChatTurn

router = APIRouter()


class ChatTurnIn(BaseModel):
    role: Literal["user", "ai"]
    text: str


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    history: list[ChatTurnIn] = []


class ChatResponse(BaseModel):
    reply: str


@router.post("", response_model=ChatResponse)
async def chat_endpoint(
    body: ChatRequest,
    _: SiteView = Depends(open_site),
    site: SiteContext = Depends(get_site),
) -> ChatResponse:
    history = [ChatTurn(role=t.role, text=t.text) for t in body.history]
    reply = await site.chat.send_turn(body.message, history)
    return ChatResponse(reply=reply)
