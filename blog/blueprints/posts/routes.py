"""
blog/blueprints/posts/routes.py

Post routes (HTTP boundary).

Provides:
- GET    /posts               list (most recently updated first)
- GET    /posts/create        create form
- POST   /posts               store
- GET    /posts/<id>          detail
- GET    /posts/<id>/edit     edit form
- PUT    /posts/<id>          update (PATCH accepted too)
- DELETE /posts/<id>          destroy

The routes only translate. All decisions live in PostWorkflow, which returns a
PostOutcome that is mapped here:
- success   -> flash + redirect to the list
- invalid   -> re-render the form (422) with inline field errors and the
               submitted values; nothing is carried over to later requests
- not_found -> 404
- failed    -> 500

HTML forms reach PUT/DELETE through POST + ?_method=... (see blog/middleware.py).
"""

from __future__ import annotations

from flask import Blueprint, abort, flash, redirect, render_template, url_for
from flask_login import login_required

from ...extensions import storage
from ...forms import PostStoreForm, PostUpdateForm
from ...repositories import PostRepository
from ...workflow import OutcomeStatus, PostOutcome, PostWorkflow

posts_bp = Blueprint("posts", __name__, url_prefix="/posts")


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _workflow() -> PostWorkflow:
    return PostWorkflow(PostRepository(), storage)


def _respond(outcome: PostOutcome, form):
    """Map a workflow outcome to an HTTP response."""
    if outcome.status is OutcomeStatus.SUCCESS:
        flash(outcome.message, "success")
        return redirect(url_for("posts.index"))

    if outcome.status is OutcomeStatus.INVALID:
        return _render_form(outcome.post, form=form, errors=outcome.errors), 422

    if outcome.status is OutcomeStatus.NOT_FOUND:
        abort(404)

    abort(500)


def _render_form(post=None, form=None, errors=None):
    """Shared create/edit form; a rejected `form` is shown with its own values."""
    old = {}
    if form is not None:
        old = {"title": form.title.data or "", "content": form.content.data or ""}

    return render_template(
        "posts/form.html",
        post=post,
        errors=errors or {},
        old=old,
        image_url=storage.url(post.featured_image) if post is not None else "",
    )


# ---------------------------------------------------------------------
# LIST
# ---------------------------------------------------------------------
@posts_bp.route("", methods=["GET"])
@login_required
def index():
    """List all posts."""
    posts = _workflow().list_posts()
    return render_template("posts/index.html", posts=posts)


# ---------------------------------------------------------------------
# CREATE
# ---------------------------------------------------------------------
@posts_bp.route("/create", methods=["GET"])
@login_required
def create():
    """Empty form."""
    return _render_form()


@posts_bp.route("", methods=["POST"])
@login_required
def store():
    """Validate and persist a new post."""
    form = PostStoreForm()
    outcome = _workflow().store(form)
    return _respond(outcome, form)


# ---------------------------------------------------------------------
# SHOW
# ---------------------------------------------------------------------
@posts_bp.route("/<int:post_id>", methods=["GET"])
@login_required
def show(post_id: int):
    """Read-only detail page."""
    post = _workflow().find(post_id)
    if post is None:
        abort(404)

    return render_template(
        "posts/show.html",
        post=post,
        image_url=storage.url(post.featured_image),
    )


# ---------------------------------------------------------------------
# EDIT / UPDATE
# ---------------------------------------------------------------------
@posts_bp.route("/<int:post_id>/edit", methods=["GET"])
@login_required
def edit(post_id: int):
    """Form pre-filled with the existing post."""
    post = _workflow().find(post_id)
    if post is None:
        abort(404)
    return _render_form(post)


@posts_bp.route("/<int:post_id>", methods=["PUT", "PATCH"])
@login_required
def update(post_id: int):
    """Apply a submitted edit, optionally replacing the featured image."""
    form = PostUpdateForm()
    outcome = _workflow().update(post_id, form)
    return _respond(outcome, form)


# ---------------------------------------------------------------------
# DELETE
# ---------------------------------------------------------------------
@posts_bp.route("/<int:post_id>", methods=["DELETE"])
@login_required
def destroy(post_id: int):
    """Delete a post together with its stored image."""
    outcome = _workflow().destroy(post_id)
    return _respond(outcome, None)
