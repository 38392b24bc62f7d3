"""
blog/repositories.py

Explicit persistence interface for Post records.

Rules:
- Nothing here raises on "not found": lookups return None and the caller
  decides what that means (404, validation, ...).
- Database errors are rolled back and reported as a falsy result
  (None / False). The workflow maps that to a server error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db
from .models import Post

# Columns the workflow is allowed to write
POST_FIELDS = ("title", "content", "featured_image")


def _writable(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only known, writable Post columns."""
    return {key: value for key, value in data.items() if key in POST_FIELDS}


class PostRepository:
    """Post CRUD over the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def list_recent(self) -> List[Post]:
        """All posts, most recently touched first."""
        return (
            self.session.query(Post)
            .order_by(Post.updated_at.desc(), Post.id.desc())
            .all()
        )

    def find_by_id(self, post_id: int) -> Optional[Post]:
        return self.session.get(Post, post_id)

    def create(self, data: Dict[str, Any]) -> Optional[Post]:
        post = Post(**_writable(data))
        try:
            self.session.add(post)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Could not create post")
            return None
        return post

    def update_by_id(self, post_id: int, data: Dict[str, Any]) -> Optional[Post]:
        post = self.find_by_id(post_id)
        if post is None:
            return None

        for key, value in _writable(data).items():
            setattr(post, key, value)

        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Could not update post %s", post_id)
            return None
        return post

    def delete_by_id(self, post_id: int) -> bool:
        post = self.find_by_id(post_id)
        if post is None:
            return False

        try:
            self.session.delete(post)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            current_app.logger.exception("Could not delete post %s", post_id)
            return False
        return True
