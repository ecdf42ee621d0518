"""Exception types raised by the store, upload and auth layers.

A missing store configuration is not an exception: it
selects the demo backend instead (see :func:`portfolio.store.select_backend`).
Chat failures never surface as exceptions either; the chat adapter turns
them into a reply string.
"""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for all application errors."""


class StoreError(PortfolioError):
    """The remote store rejected a table operation (network, permission, validation)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UploadError(StoreError):
    """Writing a file to the object bucket failed."""


class AuthError(PortfolioError):
    """Sign-in was rejected or the auth provider could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
