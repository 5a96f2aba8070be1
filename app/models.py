"""
Database models for the Blog API.

The author of a post is stored structured (first and last name in
separate columns); the flattened display name is only ever computed
from those columns when a post is serialized.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from app import db
from app.schemas import BlogPostView


def _new_post_id() -> str:
    return uuid.uuid4().hex


class BlogPost(db.Model):
    """
    Blog post record.

    Attributes:
        id: System-generated identifier, never changed after creation.
        author_first_name: Author's first name.
        author_last_name: Author's last name.
        title: Post title.
        content: Post body.
        created: Timestamp when the post was created.
    """

    __tablename__ = "blog_posts"

    id: str = db.Column(db.String(32), primary_key=True, default=_new_post_id)
    author_first_name: str = db.Column(db.String(100), nullable=False)
    author_last_name: str = db.Column(db.String(100), nullable=False)
    title: str = db.Column(db.Text, nullable=False)
    content: str = db.Column(db.Text, nullable=False)
    created: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    @property
    def author(self) -> dict[str, str]:
        """Structured author as ``{"firstName": ..., "lastName": ...}``."""
        return {
            "firstName": self.author_first_name,
            "lastName": self.author_last_name,
        }

    @property
    def author_name(self) -> str:
        """Display name of the author, e.g. ``"Ada Lovelace"``."""
        return f"{self.author_first_name} {self.author_last_name}"

    @staticmethod
    def _to_utc(value: datetime | None) -> datetime | None:
        """
        Normalize a datetime to timezone-aware UTC.

        SQLite returns naive datetime values even for timezone-aware
        columns, so naive values are treated as UTC.
        """
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def serialize(self) -> dict[str, Any]:
        """
        Convert the post to its wire representation.

        Returns:
            Dictionary with id, flattened author, title, content and
            the ISO-8601 creation timestamp.
        """
        view = BlogPostView(
            id=self.id,
            author=self.author_name,
            title=self.title,
            content=self.content,
            created=self._to_utc(self.created),
        )
        return view.model_dump(mode="json")

    def __repr__(self) -> str:
        """Return string representation of the post."""
        return f"<BlogPost {self.id}: {self.title}>"
