"""
Public storage blueprint package.

Serves files written by PublicStorage (e.g. post featured images).
"""

from .routes import storage_bp  # noqa: F401
