"""
blog/storage.py

Public file storage for uploaded post images.

Files live under a single public root directory (STORAGE_PUBLIC_ROOT) and are
addressed by paths relative to it, e.g.:

    images/posts/featured-images/3f2a...e1.jpg

Those relative paths are what gets persisted on the Post row. URL resolution
is a separate call (url()), so the stored path never depends on where the
files are served from.

IMPORTANT:
- delete() never raises for a missing path. Callers delete unconditionally.
- put() lets I/O errors propagate; the request fails with a 500.
"""

from __future__ import annotations

import os
import uuid

from flask import Flask, current_app
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import NotFound
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename


EXTENSION_KEY = "public_storage"


class _StorageState:
    """Per-app settings, kept in app.extensions[EXTENSION_KEY]."""

    def __init__(self, root: str, base_url: str):
        self.root = root
        self.base_url = base_url


class PublicStorage:
    """
    Local-disk storage adapter with the put / delete / url contract.

    One instance can serve several apps: settings are resolved from the
    current app on every call, so an app context is required.
    """

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Read STORAGE_PUBLIC_ROOT / STORAGE_PUBLIC_URL and make sure the root exists."""
        root = app.config.get("STORAGE_PUBLIC_ROOT") or os.path.join(app.instance_path, "storage", "public")
        root = os.path.abspath(str(root))
        base_url = (app.config.get("STORAGE_PUBLIC_URL") or "/storage").rstrip("/")
        os.makedirs(root, exist_ok=True)

        app.extensions[EXTENSION_KEY] = _StorageState(root, base_url)

    @staticmethod
    def _state() -> _StorageState:
        state = current_app.extensions.get(EXTENSION_KEY)
        if state is None:
            raise RuntimeError("PublicStorage is not initialized for this app. Call init_app() first.")
        return state

    @property
    def root(self) -> str:
        return self._state().root

    @property
    def base_url(self) -> str:
        return self._state().base_url

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------
    def absolute_path(self, path: str) -> str:
        """
        Resolve a relative storage path to an absolute one under the root.

        Raises NotFound for paths that would escape the root.
        """
        resolved = safe_join(self.root, path)
        if resolved is None:
            raise NotFound()
        return resolved

    @staticmethod
    def _extension(filename: str | None) -> str:
        cleaned = secure_filename(filename or "")
        if "." not in cleaned:
            return ""
        return "." + cleaned.rsplit(".", 1)[1].lower()

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def put(self, file: FileStorage, prefix: str) -> str:
        """
        Store an upload under <root>/<prefix>/ with a generated name.

        Returns the path relative to the root.
        """
        prefix = prefix.strip("/")
        name = f"{uuid.uuid4().hex}{self._extension(file.filename)}"
        relative = f"{prefix}/{name}" if prefix else name

        target = self.absolute_path(relative)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        file.save(target)

        current_app.logger.debug("Stored upload %r as %s", file.filename, relative)
        return relative

    def exists(self, path: str | None) -> bool:
        if not path:
            return False
        try:
            return os.path.isfile(self.absolute_path(path))
        except NotFound:
            return False

    def delete(self, path: str | None) -> bool:
        """Remove a stored file. Returns False if there was nothing to remove."""
        if not self.exists(path):
            return False

        os.remove(self.absolute_path(path))
        current_app.logger.debug("Deleted stored file %s", path)
        return True

    def url(self, path: str | None) -> str:
        """Public URL for a stored path ('' when there is no file)."""
        if not path:
            return ""
        return f"{self.base_url}/{path.lstrip('/')}"
