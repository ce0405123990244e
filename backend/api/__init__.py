"""
COI Tracker API package.

Provides the FastAPI application for tracking and sharing certificates
of insurance.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
