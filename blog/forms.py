"""
Post forms (validation layer).

Two rule sets:
- PostStoreForm: title, content and featured_image are all required.
- PostUpdateForm: featured_image is optional; if sent it must still be an image.

Messages mirror the wording users see inline on the form, e.g.
"The featured image field is required."
"""

from __future__ import annotations

from typing import Dict

from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField, FileRequired
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length, ValidationError

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png")


def _required(label: str) -> str:
    return f"The {label} field is required."


class ImageFile:
    """Reject uploads whose declared mimetype is not an image/* type."""

    def __init__(self, message: str | None = None):
        self.message = message

    def __call__(self, form, field):
        upload = field.data
        if not upload:
            return
        mimetype = (getattr(upload, "mimetype", "") or "").lower()
        if not mimetype.startswith("image/"):
            raise ValidationError(self.message or f"The {field.label.text.lower()} must be an image.")


class _PostForm(FlaskForm):
    title = StringField(
        "Title",
        validators=[
            DataRequired(message=_required("title")),
            Length(max=255, message="The title must not be greater than 255 characters."),
        ],
    )
    content = TextAreaField("Content", validators=[DataRequired(message=_required("content"))])

    def validated_data(self) -> Dict[str, str]:
        """Cleaned text fields, ready for the repository."""
        return {
            "title": (self.title.data or "").strip(),
            "content": (self.content.data or "").strip(),
        }

    @property
    def upload(self):
        """The uploaded FileStorage, or None when no file was sent."""
        return self.featured_image.data or None


class PostStoreForm(_PostForm):
    featured_image = FileField(
        "Featured Image",
        validators=[
            FileRequired(message=_required("featured image")),
            FileAllowed(IMAGE_EXTENSIONS, message="The featured image must be a file of type: jpg, jpeg, png."),
            ImageFile(),
        ],
    )


class PostUpdateForm(_PostForm):
    featured_image = FileField(
        "Featured Image",
        validators=[
            FileAllowed(IMAGE_EXTENSIONS, message="The featured image must be a file of type: jpg, jpeg, png."),
            ImageFile(),
        ],
    )
