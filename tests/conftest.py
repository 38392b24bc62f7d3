"""Shared fixtures: app with in-memory DB, temporary storage, logged-in client."""

import io
import os
import uuid

import pytest

from blog import create_app
from blog.extensions import db, storage
from blog.models import Post, User

USERNAME = "editor"
PASSWORD = "secret-password"

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


def image_upload(filename="featured_image.jpg"):
    """Multipart file tuple accepted by the Werkzeug test client."""
    return (io.BytesIO(PNG_BYTES), filename)


@pytest.fixture
def app(tmp_path):
    app = create_app(
        "config.TestingConfig",
        {"STORAGE_PUBLIC_ROOT": str(tmp_path / "public")},
    )

    with app.app_context():
        db.create_all()

        user = User(username=USERNAME, is_active=True)
        user.set_password(PASSWORD)
        db.session.add(user)
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post("/auth/login", data={"username": USERNAME, "password": PASSWORD})
    assert response.status_code == 302
    return client


@pytest.fixture
def make_post(app):
    """Create a Post row (with a real stored image unless with_image=False); returns its id."""

    def _make(title="First post", content="Hello world", with_image=True, updated_at=None):
        with app.app_context():
            path = None
            if with_image:
                path = f"images/posts/featured-images/{uuid.uuid4().hex}.png"
                target = storage.absolute_path(path)
                os.makedirs(os.path.dirname(target), exist_ok=True)
                with open(target, "wb") as fh:
                    fh.write(PNG_BYTES)

            post = Post(title=title, content=content, featured_image=path)
            if updated_at is not None:
                post.updated_at = updated_at
            db.session.add(post)
            db.session.commit()
            return post.id

    return _make
