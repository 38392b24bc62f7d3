"""
blog/blueprints/posts/__init__.py

Blueprint package export.

IMPORTANT:
- Must expose posts_bp for app factory registration.
- Keep import minimal to avoid side effects.
"""

from __future__ import annotations

from .routes import posts_bp  # noqa: F401
