"""Content store package.

Public re-exports so callers can write::

    from portfolio.store import ContentService, select_backend
"""

from portfolio.store.base import StorageBackend
from portfolio.store.content import ContentService
from portfolio.store.demo import DemoBackend
from portfolio.store.remote import RemoteBackend
from portfolio.store.selection import select_backend

__all__ = [
    "StorageBackend",
    "ContentService",
    "DemoBackend",
    "RemoteBackend",
    "select_backend",
]
