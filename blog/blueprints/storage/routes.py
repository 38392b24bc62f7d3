"""
Public storage file serving.

GET /storage/<path> -> file from STORAGE_PUBLIC_ROOT.

Public on purpose: image previews are embedded in pages and must load like
any static asset. send_from_directory rejects paths escaping the root.
"""

from flask import Blueprint, send_from_directory

from ...extensions import storage

storage_bp = Blueprint("storage", __name__, url_prefix="/storage")


@storage_bp.route("/<path:path>")
def serve(path: str):
    """Stream a stored file."""
    return send_from_directory(storage.root, path)
