"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from portfolio.api import app

    uvicorn portfolio.api:app --reload
"""

from portfolio.api.app import app

__all__ = ["app"]
