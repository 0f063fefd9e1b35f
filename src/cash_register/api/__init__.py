"""
HTTP API Package

FastAPI front end for the change engine. Run with:

    cash-register serve

or directly:

    uvicorn cash_register.api.app:create_app --factory
"""

from .app import create_app

__all__ = ["create_app"]
