"""Pick the storage backend once, at startup."""

from __future__ import annotations

import logging

import httpx

from portfolio.config import Settings, settings as default_settings
from portfolio.store.base import StorageBackend
from portfolio.store.demo import DemoBackend
from portfolio.store.remote import RemoteBackend

logger = logging.getLogger(__name__)


def select_backend(
    client: httpx.AsyncClient | None,
    config: Settings | None = None,
) -> StorageBackend:
    """Supabase when both store credentials are set, demo mode otherwise.

    *client* may be ``None`` only when the store is unconfigured.
    """
    config = config or default_settings
    if not config.store_configured:
        logger.info("Supabase not configured, running in demo mode with sample data")
        return DemoBackend()
    if client is None:
        raise ValueError("An HTTP client is required for the Supabase backend.")
    return RemoteBackend(
        client,
        config.supabase_url,
        config.supabase_anon_key,
        bucket=config.storage_bucket,
    )
