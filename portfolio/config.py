"""Centralised settings for the portfolio backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Leaving ``SUPABASE_URL`` / ``SUPABASE_ANON_KEY`` empty runs the site in demo
mode; leaving ``GEMINI_API_KEY`` empty disables the chat assistant.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Remote store (Supabase)
    # ------------------------------------------------------------------
    supabase_url: str = field(
        default_factory=lambda: os.environ.get("SUPABASE_URL", "")
    )
    supabase_anon_key: str = field(
        default_factory=lambda: os.environ.get("SUPABASE_ANON_KEY", "")
    )
    storage_bucket: str = field(
        default_factory=lambda: os.environ.get("STORAGE_BUCKET", "portfolio-images")
    )

    @property
    def store_configured(self) -> bool:
        """True when both store credentials are present."""
        return bool(self.supabase_url and self.supabase_anon_key)

    # ------------------------------------------------------------------
    # Chat model (Gemini)
    # ------------------------------------------------------------------
    gemini_api_key: str = field(
        default_factory=lambda: os.environ.get("GEMINI_API_KEY", "")
    )
    gemini_model: str = field(
        default_factory=lambda: os.environ.get("GEMINI_MODEL", "gemini-flash-latest")
    )
    gemini_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        )
    )

    # ------------------------------------------------------------------
    # HTTP / sessions
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    session_cookie_name: str = field(
        default_factory=lambda: os.environ.get("SESSION_COOKIE_NAME", "portfolio_session")
    )
    cookie_secure: bool = field(
        default_factory=lambda: os.environ.get("COOKIE_SECURE", "false").lower() == "true"
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from portfolio.config import settings
settings = Settings()
