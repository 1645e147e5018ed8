"""Prints comment statistics straight from the configured database."""
from sqlalchemy import func

from dtt_server.config import logger
from dtt_server.database import SessionLocal, init_db
from dtt_server.models import Comment, CommentLike, Notification


def check_comments(limit: int = 10):
    init_db()
    db = SessionLocal()
    try:
        total = db.query(Comment).count()
        top_level = db.query(Comment).filter(Comment.parent_id.is_(None)).count()
        logger.info(f"Comments: {total} | top-level: {top_level} | replies: {total - top_level}")

        for c in db.query(Comment).order_by(Comment.created_at.desc(), Comment.id.desc()).limit(limit):
            parent = f" -> #{c.parent_id}" if c.parent_id else ""
            logger.info(f"#{c.id}{parent} [{c.resource_type}:{c.resource_id}] {c.username}: {c.content[:50]}")

        # replies whose parent is gone or is itself a reply break the one-level tree
        parents = db.query(Comment.id, Comment.parent_id).subquery()
        broken = (
            db.query(Comment.id)
            .outerjoin(parents, parents.c.id == Comment.parent_id)
            .filter(Comment.parent_id.isnot(None))
            .filter((parents.c.id.is_(None)) | (parents.c.parent_id.isnot(None)))
            .count()
        )
        if broken:
            logger.warning(f"Broken replies (missing or nested parent): {broken}")

        likes = dict(
            db.query(CommentLike.comment_id, func.count(CommentLike.id)).group_by(CommentLike.comment_id).all()
        )
        drift = [c.id for c in db.query(Comment) if c.like_count != likes.get(c.id, 0)]
        if drift:
            logger.warning(f"like_count out of sync for comments: {drift[:20]}")

        unread = db.query(Notification).filter(Notification.is_read.is_(False)).count()
        logger.info(f"Likes: {sum(likes.values())} | unread notifications: {unread}")
    finally:
        db.close()


if __name__ == "__main__":
    check_comments()
