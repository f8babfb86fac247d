"""Database models for the blog store."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.sql import func

from .extensions import db


TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100


class Post(db.Model):
    """A published blog post.

    SQLite ignores ``VARCHAR(n)`` lengths, so the limits are repeated as CHECK
    constraints to make the local store reject the rows Postgres rejects.
    """

    __tablename__ = "posts"
    __table_args__ = (
        db.CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="posts_title_length"),
        db.CheckConstraint(
            f"author IS NULL OR length(author) <= {AUTHOR_MAX_LENGTH}",
            name="posts_author_length",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(AUTHOR_MAX_LENGTH), nullable=True)
    created_at = db.Column(db.DateTime, server_default=func.now())

    comments = db.relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Comment(db.Model):
    """A reader comment. Declared for schema parity; the API never touches it."""

    __tablename__ = "comments"
    __table_args__ = (
        db.CheckConstraint(
            f"author IS NULL OR length(author) <= {AUTHOR_MAX_LENGTH}",
            name="comments_author_length",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("posts.id", ondelete="CASCADE"))
    author = db.Column(db.String(AUTHOR_MAX_LENGTH), nullable=True)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, server_default=func.now())

    post = db.relationship("Post", back_populates="comments")
