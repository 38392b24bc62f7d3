"""
blog/workflow.py

Post workflow: validate -> (store file) -> persist -> outcome.

The workflow never touches the request, the session or flash(). Each mutating
operation returns a PostOutcome and the route layer decides how to present it
(redirect + flash, re-rendered form, 404, 500).

File handling:
- store(): the upload is written first, then the record is created.
  If the record cannot be created, the fresh upload is removed again.
- update(): a new upload is written, the record updated, and only then the
  previous file is removed. If the update fails the new file is removed and
  the previous one stays referenced.
- destroy(): the stored file is removed unconditionally, then the record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from flask import current_app

from .models import Post

FEATURED_IMAGE_PREFIX = "images/posts/featured-images"

MSG_CREATED = "Post created successfully!"
MSG_UPDATED = "Post updated successfully!"
MSG_DELETED = "Post deleted successfully!"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class PostOutcome:
    """Result of a workflow operation."""

    status: OutcomeStatus
    post: Optional[Post] = None
    message: Optional[str] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def success(cls, post: Optional[Post], message: str) -> "PostOutcome":
        return cls(OutcomeStatus.SUCCESS, post=post, message=message)

    @classmethod
    def invalid(cls, errors: Dict[str, List[str]], post: Optional[Post] = None) -> "PostOutcome":
        return cls(OutcomeStatus.INVALID, post=post, errors=dict(errors))

    @classmethod
    def not_found(cls) -> "PostOutcome":
        return cls(OutcomeStatus.NOT_FOUND)

    @classmethod
    def failed(cls, post: Optional[Post] = None) -> "PostOutcome":
        return cls(OutcomeStatus.FAILED, post=post)


class PostWorkflow:
    """Orchestrates the validation layer, storage adapter and repository."""

    def __init__(self, repository, storage, image_prefix: str = FEATURED_IMAGE_PREFIX):
        self.repository = repository
        self.storage = storage
        self.image_prefix = image_prefix

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_posts(self) -> List[Post]:
        return list(self.repository.list_recent() or [])

    def find(self, post_id: int) -> Optional[Post]:
        return self.repository.find_by_id(post_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def store(self, form) -> PostOutcome:
        if not form.validate():
            return PostOutcome.invalid(form.errors)

        data = form.validated_data()

        stored_path = None
        if form.upload is not None:
            stored_path = self.storage.put(form.upload, self.image_prefix)
            data["featured_image"] = stored_path

        post = self.repository.create(data)
        if not post:
            if stored_path:
                self.storage.delete(stored_path)
            return PostOutcome.failed()

        current_app.logger.info("Post %s created", post.id)
        return PostOutcome.success(post, MSG_CREATED)

    def update(self, post_id: int, form) -> PostOutcome:
        post = self.repository.find_by_id(post_id)
        if post is None:
            return PostOutcome.not_found()

        if not form.validate():
            return PostOutcome.invalid(form.errors, post)

        data = form.validated_data()
        previous_path = post.featured_image

        stored_path = None
        if form.upload is not None:
            stored_path = self.storage.put(form.upload, self.image_prefix)
            data["featured_image"] = stored_path

        updated = self.repository.update_by_id(post_id, data)
        if not updated:
            if stored_path:
                self.storage.delete(stored_path)
            return PostOutcome.failed(post)

        if stored_path:
            self.storage.delete(previous_path)

        current_app.logger.info("Post %s updated", post_id)
        return PostOutcome.success(updated, MSG_UPDATED)

    def destroy(self, post_id: int) -> PostOutcome:
        post = self.repository.find_by_id(post_id)
        if post is None:
            return PostOutcome.not_found()

        self.storage.delete(post.featured_image)

        if not self.repository.delete_by_id(post_id):
            return PostOutcome.failed(post)

        current_app.logger.info("Post %s deleted", post_id)
        return PostOutcome.success(None, MSG_DELETED)
