"""
REST API endpoints for blog posts.

All endpoints exchange JSON. Request bodies are validated against the
schemas in ``app.schemas`` before anything reaches the store, and store
outcomes are translated into status codes here.

Endpoints:
    GET    /health       - Health check
    GET    /posts        - List all posts
    GET    /posts/<id>   - Get a single post by ID
    POST   /posts        - Create a new post
    PUT    /posts/<id>   - Update title and/or content of a post
    DELETE /posts/<id>   - Delete a post
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response

from app import db
from app.errors import ConflictError, NotFoundError
from app.schemas import PostCreate, PostUpdate, parse_body
from app.store import PostStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def get_store() -> PostStore:
    """Build a store over the request's database session."""
    return PostStore(db.session)


def _no_content() -> tuple[str, int]:
    return "", 204


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/posts", methods=["GET"])
def get_posts() -> tuple[Response, int]:
    """
    List all blog posts.

    Returns:
        JSON array of post views and 200 status code.
    """
    logger.info("GET /posts - Fetching all posts")

    posts = get_store().list_all()
    logger.info(f"Found {len(posts)} posts")

    return jsonify([post.serialize() for post in posts]), 200


@api_bp.route("/posts/<post_id>", methods=["GET"])
def get_post(post_id: str) -> tuple[Response, int]:
    """
    Get a single post by ID.

    Returns:
        JSON post view and 200 status code, or 404 if not found.
    """
    logger.info(f"GET /posts/{post_id} - Fetching post")

    post = get_store().get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")

    return jsonify(post.serialize()), 200


@api_bp.route("/posts", methods=["POST"])
def create_post() -> tuple[Response, int]:
    """
    Create a new post.

    Request Body (JSON):
        author: {"firstName": ..., "lastName": ...} (required)
        title: Post title (required)
        content: Post body (required)

    Returns:
        JSON post view and 201 status code, or 400 if validation fails.
    """
    logger.info("POST /posts - Creating new post")

    body = parse_body(PostCreate, request.get_json(silent=True))
    post = get_store().create(
        author=body.author.model_dump(),
        title=body.title,
        content=body.content,
    )

    return jsonify(post.serialize()), 201


@api_bp.route("/posts/<post_id>", methods=["PUT"])
def update_post(post_id: str) -> tuple[str, int]:
    """
    Update the title and/or content of a post.

    Request Body (JSON):
        id: Must equal the id in the URL (required)
        title: New title (optional)
        content: New body (optional)

    Returns:
        Empty 204 response, 400 on id mismatch or invalid fields,
        404 if the post does not exist.
    """
    logger.info(f"PUT /posts/{post_id} - Updating post")

    body = parse_body(PostUpdate, request.get_json(silent=True))
    if body.id != post_id:
        raise ConflictError(
            f"Request path id ({post_id}) and request body id ({body.id}) must match"
        )

    post = get_store().update_by_id(post_id, body.changes())
    if post is None:
        raise NotFoundError("Post not found")

    return _no_content()


@api_bp.route("/posts/<post_id>", methods=["DELETE"])
def delete_post(post_id: str) -> tuple[str, int]:
    """
    Delete a post.

    Deleting an id that does not exist is not an error; the response
    is 204 either way.
    """
    logger.info(f"DELETE /posts/{post_id} - Deleting post")

    if not get_store().delete_by_id(post_id):
        logger.warning(f"Post {post_id} not found, nothing to delete")

    return _no_content()
