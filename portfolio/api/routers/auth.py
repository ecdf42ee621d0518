"""Login / logout endpoints.

Routes
------
GET  /login    Login view
POST /login    Email + password sign-in; sets the session cookie
POST /logout   Destroys the session and redirects to /login
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, EmailStr

from portfolio.api.deps import SiteContext, get_gate, get_site
from portfolio.auth.gate import AuthGate
from portfolio.maintenance import ADMIN_PREFIX, LOGIN_PATH

router = APIRouter()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


@router.get(LOGIN_PATH, response_model=dict[str, Any])
def login_view() -> dict[str, Any]:
    return {"view": "login"}


@router.post(LOGIN_PATH)
async def login_endpoint(
    body: LoginRequest,
    site: SiteContext = Depends(get_site),
) -> JSONResponse:
    """Sign in.  Rejected credentials answer 401 with the provider's message."""
    session = await site.auth.sign_in(str(body.email), body.password)
    response = JSONResponse({"redirect": ADMIN_PREFIX, "email": session.email})

    max_age = None
    if session.expires_at:
        max_age = max(int(session.expires_at - time.time()), 0)
    response.set_cookie(
        key=site.config.session_cookie_name,
        value=session.access_token,
        max_age=max_age,
        httponly=True,
        secure=site.config.cookie_secure,
        samesite="lax",
        path="/",
    )
    return response


@router.post("/logout")
async def logout_endpoint(
    gate: AuthGate = Depends(get_gate),
    site: SiteContext = Depends(get_site),
) -> RedirectResponse:
    await gate.logout()
    response = RedirectResponse(LOGIN_PATH, status_code=303)
    response.delete_cookie(site.config.session_cookie_name, path="/")
    return response
