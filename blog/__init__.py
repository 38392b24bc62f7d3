"""
blog/__init__.py

Flask application factory for the blog post manager.

- SQLite is used for dev; any SQLAlchemy URL works via DATABASE_URL.
- Uploaded images go to the public storage root and are served under /storage.
- Every /posts route requires a logged-in user.
"""

from __future__ import annotations

import click
from flask import Flask, redirect, render_template, url_for
from flask_login import current_user

from .extensions import csrf, db, login_manager, migrate, storage
from .middleware import MethodOverrideMiddleware
from .models import User


def create_app(config_object: str = "config.Config", overrides: dict | None = None) -> Flask:
    """
    Create and configure the Flask application.

    `overrides` is applied on top of the config object (used by tests to point
    storage at a temporary directory).
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    storage.init_app(app)

    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message_category = "info"

    @login_manager.user_loader
    def load_user(user_id: str) -> User | None:
        """Load user for Flask-Login."""
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    # PUT/PATCH/DELETE from HTML forms
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # ----------------------------------------------------------------------
    # Blueprints
    # ----------------------------------------------------------------------
    from .blueprints.auth import auth_bp
    from .blueprints.posts import posts_bp
    from .blueprints.storage import storage_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(posts_bp)
    app.register_blueprint(storage_bp)

    # ----------------------------------------------------------------------
    # Templates
    # ----------------------------------------------------------------------
    @app.context_processor
    def inject_globals():
        return {"config": app.config, "storage_url": storage.url}

    # ----------------------------------------------------------------------
    # Error pages
    # ----------------------------------------------------------------------
    @app.errorhandler(404)
    def not_found(error):
        return render_template("errors/404.html"), 404

    @app.errorhandler(413)
    def too_large(error):
        return render_template("errors/413.html"), 413

    @app.errorhandler(500)
    def server_error(error):
        return render_template("errors/500.html"), 500

    # ----------------------------------------------------------------------
    # CLI
    # ----------------------------------------------------------------------
    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables (dev shortcut; use flask db upgrade with migrations)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("create-user")
    @click.argument("username")
    @click.password_option()
    def create_user_command(username: str, password: str):
        """Create a login user."""
        username = username.strip()
        if User.query.filter_by(username=username).first():
            raise click.ClickException(f"User '{username}' already exists.")

        user = User(username=username, is_active=True)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"User '{username}' created.")

    # ----------------------------------------------------------------------
    # Home
    # ----------------------------------------------------------------------
    @app.route("/")
    def index():
        """Home: redirect to the post list or login."""
        if current_user.is_authenticated:
            return redirect(url_for("posts.index"))
        return redirect(url_for("auth.login"))

    return app
