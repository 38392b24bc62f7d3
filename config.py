"""
Application configuration.
This module defines the configuration settings for the Flask application, including database connection, secret key,
upload storage and other settings. It uses environment variables for sensitive information and defaults for development.
In production, make sure to set the appropriate environment variables and secure the secret key.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration shared by all environments."""

    # IMPORTANT: change this in production
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me-please")

    # Database: SQLite for development (simple file in project folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'blog.db'}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Public file storage (uploaded featured images)
    STORAGE_PUBLIC_ROOT = os.environ.get("STORAGE_PUBLIC_ROOT", str(BASE_DIR / "storage" / "public"))
    STORAGE_PUBLIC_URL = os.environ.get("STORAGE_PUBLIC_URL", "/storage")

    # Reject request bodies above this size (413)
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 5 * 1024 * 1024))

    # CSRF protection for forms
    WTF_CSRF_ENABLED = True

    # App UI name (used in templates)
    APP_NAME = "Blog"


class TestingConfig(Config):
    """Used by the test suite: in-memory DB, no CSRF tokens."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    SECRET_KEY = "testing"
