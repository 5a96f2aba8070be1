"""
Persistence layer for blog posts.

``PostStore`` wraps a SQLAlchemy session and is the only code that
reads or writes ``BlogPost`` rows. Every mutating call commits its own
transaction; reads never mutate.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.errors import ValidationError
from app.models import BlogPost

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _build_post(
    author: Mapping[str, str] | None,
    title: str | None,
    content: str | None,
    created: datetime | None = None
) -> BlogPost:
    """Check required fields and build an unsaved post."""
    if not isinstance(author, Mapping):
        raise ValidationError("'author' is required")
    for field, value in (
        ("author.firstName", author.get("firstName")),
        ("author.lastName", author.get("lastName")),
        ("title", title),
        ("content", content),
    ):
        if _is_blank(value):
            raise ValidationError(f"'{field}' is required")

    post = BlogPost(
        author_first_name=author["firstName"],
        author_last_name=author["lastName"],
        title=title,
        content=content,
    )
    if created is not None:
        post.created = created
    return post


class PostStore:
    """
    Create, read, update and delete blog posts.

    Example:
        store = PostStore(db.session)
        post = store.create({"firstName": "Ada", "lastName": "Lovelace"}, "T", "C")
        store.update_by_id(post.id, {"title": "T2"})
    """

    def __init__(self, session: Session):
        self._session = session

    def create(
        self,
        author: Mapping[str, str],
        title: str | None,
        content: str | None,
        created: datetime | None = None
    ) -> BlogPost:
        """
        Persist a new post.

        Args:
            author: Mapping with ``firstName`` and ``lastName``.
            title: Post title.
            content: Post body.
            created: Optional creation timestamp; defaults to now.

        Returns:
            The stored post with its generated id.

        Raises:
            ValidationError: If an author name, title or content is missing.
        """
        post = _build_post(author, title, content, created)
        self._session.add(post)
        self._session.commit()
        logger.info(f"Created post {post.id}")
        return post

    def insert_many(self, records: Iterable[Mapping[str, Any]]) -> list[BlogPost]:
        """
        Persist several posts in one transaction.

        Each record has the same shape as a ``POST /posts`` body:
        ``author`` (firstName/lastName), ``title``, ``content`` and an
        optional ``created``. Nothing is stored if any record is
        invalid.

        Raises:
            ValidationError: If a record lacks a required field.
        """
        posts = []
        for record in records:
            posts.append(_build_post(
                record.get("author"),
                record.get("title"),
                record.get("content"),
                record.get("created"),
            ))

        self._session.add_all(posts)
        self._session.commit()
        logger.info(f"Inserted {len(posts)} posts")
        return posts

    def list_all(self) -> list[BlogPost]:
        """Return every stored post, newest first."""
        stmt = select(BlogPost).order_by(BlogPost.created.desc())
        return list(self._session.scalars(stmt).all())

    def count(self) -> int:
        """Return the total number of stored posts."""
        return self._session.scalar(select(func.count()).select_from(BlogPost))

    def get_by_id(self, post_id: str) -> BlogPost | None:
        """Return the post with ``post_id``, or None if there is none."""
        return self._session.get(BlogPost, post_id)

    def update_by_id(self, post_id: str, changes: Mapping[str, str]) -> BlogPost | None:
        """
        Replace the supplied fields of a post.

        Only ``title`` and ``content`` are applied; any other key is
        ignored, so the id, author and creation time never change here.

        Returns:
            The updated post, or None if no post has ``post_id``.
        """
        post = self.get_by_id(post_id)
        if post is None:
            return None

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(post, field, changes[field])

        self._session.commit()
        logger.info(f"Updated post {post_id}")
        return post

    def delete_by_id(self, post_id: str) -> bool:
        """
        Remove a post.

        Returns:
            True if a post was deleted, False if none had ``post_id``.
        """
        post = self.get_by_id(post_id)
        if post is None:
            return False

        self._session.delete(post)
        self._session.commit()
        logger.info(f"Deleted post {post_id}")
        return True
