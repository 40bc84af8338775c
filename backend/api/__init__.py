"""
Homemaidy navigation API package.

Provides the FastAPI application exposing the route guard and the
navigation and route health monitors.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
