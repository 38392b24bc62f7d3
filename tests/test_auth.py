"""Tests for login/logout and the user CLI."""

from blog.extensions import db
from blog.models import User

from .conftest import PASSWORD, USERNAME


class TestLogin:
    def test_login_page(self, client):
        assert client.get("/auth/login").status_code == 200

    def test_login_redirects_to_next(self, client):
        response = client.post(
            "/auth/login?next=/posts/create",
            data={"username": USERNAME, "password": PASSWORD},
        )

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/posts/create")

    def test_login_ignores_external_next(self, client):
        response = client.post(
            "/auth/login?next=https://evil.example/",
            data={"username": USERNAME, "password": PASSWORD},
        )

        assert response.headers["Location"].endswith("/posts")

    def test_wrong_password(self, client):
        response = client.post("/auth/login", data={"username": USERNAME, "password": "nope"})

        assert response.status_code == 401
        assert client.get("/posts").status_code == 302

    def test_inactive_user_cannot_log_in(self, app, client):
        with app.app_context():
            user = User.query.filter_by(username=USERNAME).first()
            user.is_active = False
            db.session.commit()

        response = client.post("/auth/login", data={"username": USERNAME, "password": PASSWORD})

        assert response.status_code == 403

    def test_logout(self, auth_client):
        response = auth_client.post("/auth/logout")

        assert response.headers["Location"].endswith("/auth/login")
        assert auth_client.get("/posts").status_code == 302


class TestCli:
    def test_create_user(self, app):
        runner = app.test_cli_runner()

        result = runner.invoke(args=["create-user", "writer", "--password", "pw123456"])

        assert result.exit_code == 0, result.output
        with app.app_context():
            user = User.query.filter_by(username="writer").first()
            assert user is not None
            assert user.check_password("pw123456")

    def test_create_duplicate_user_fails(self, app):
        runner = app.test_cli_runner()

        result = runner.invoke(args=["create-user", USERNAME, "--password", "pw"])

        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_init_db(self, app):
        result = app.test_cli_runner().invoke(args=["init-db"])

        assert result.exit_code == 0
        assert "Database tables created." in result.output
