"""Admin authentication: provider adapters and the session gate."""

from portfolio.auth.gate import AuthGate, GateState
from portfolio.auth.provider import (
    AuthProvider,
    DemoAuthProvider,
    Session,
    SupabaseAuthProvider,
    select_auth_provider,
)

__all__ = [
    "AuthGate",
    "GateState",
    "AuthProvider",
    "DemoAuthProvider",
    "Session",
    "SupabaseAuthProvider",
    "select_auth_provider",
]
