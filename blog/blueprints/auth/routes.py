"""
Authentication Routes

Provides:
- /auth/login
- /auth/logout

Accounts are created from the CLI (flask create-user), there is no sign-up page.
"""

from urllib.parse import urlparse

from flask import (
    Blueprint,
    render_template,
    redirect,
    url_for,
    flash,
    request,
)
from flask_login import (
    login_user,
    logout_user,
    login_required,
    current_user,
)

from ...models import User


auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _safe_next_url(raw_next: str | None) -> str:
    """
    Return a safe local next URL.

    Rules:
    - Only allow relative URLs (no scheme/netloc).
    - Fall back to the post list if invalid/empty.
    """
    fallback = url_for("posts.index")
    if not raw_next:
        return fallback

    parsed = urlparse(raw_next)
    if parsed.scheme or parsed.netloc or not raw_next.startswith("/"):
        return fallback

    return raw_next


# ============================================================
# LOGIN
# ============================================================

@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """
    Authenticate a user.

    - Only active users may log in
    - Credentials validated via password hash
    """

    if current_user.is_authenticated:
        return redirect(url_for("posts.index"))

    if request.method == "POST":
        username = request.form.get("username", "").strip()
        password = request.form.get("password", "")

        user = User.query.filter_by(username=username).first()

        if not user or not user.check_password(password):
            flash("Invalid username or password.", "danger")
            return render_template("auth/login.html"), 401

        if not user.is_active:
            flash("This account is disabled.", "danger")
            return render_template("auth/login.html"), 403

        login_user(user)
        flash("Welcome back!", "success")

        return redirect(_safe_next_url(request.args.get("next")))

    return render_template("auth/login.html")


# ============================================================
# LOGOUT
# ============================================================

@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    """Log out the current user."""
    logout_user()
    flash("You have been logged out.", "info")
    return redirect(url_for("auth.login"))
