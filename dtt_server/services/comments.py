"""
Comments on songs and singles.

Replies are kept one level deep: a reply always hangs under a top-level
comment (``parent_id``), and when somebody answers a reply the new comment is
attached to the same top-level comment while ``reply_to_id`` /
``reply_to_username`` remember who was actually answered.

``like_count`` is denormalised and only ever changed together with a
``CommentLike`` row in the same transaction.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..config import COMMENT_MAX_LENGTH, REPLY_PREVIEW
from ..errors import AppError, ConflictError, ForbiddenError, NotFoundError
from ..models import Comment, CommentLike, Notification, User
from .catalog import ensure_resource
from .notifications import notify

logger = logging.getLogger(__name__)

SORT_LATEST = "latest"
SORT_HOT = "hot"
SORT_OPTIONS = (SORT_LATEST, SORT_HOT)


def _clean_content(content: Optional[str]) -> str:
    content = (content or "").strip()
    if not content:
        raise AppError("Comment content cannot be empty")
    if len(content) > COMMENT_MAX_LENGTH:
        raise AppError(f"Comment content cannot exceed {COMMENT_MAX_LENGTH} characters")
    return content


def get_comment(db: Session, comment_id: int) -> Comment:
    comment = db.query(Comment).filter_by(id=comment_id).first()
    if not comment:
        raise NotFoundError("Comment not found")
    return comment


def create_comment(
    db: Session,
    resource_type: str,
    resource_id: str,
    user: User,
    content: str,
    parent_id: Optional[int] = None,
) -> Comment:
    content = _clean_content(content)
    ensure_resource(db, resource_type, resource_id)

    comment = Comment(
        resource_type=resource_type,
        resource_id=resource_id,
        username=user.username,
        content=content,
        like_count=0,
    )

    target = None
    if parent_id is not None:
        target = db.query(Comment).filter_by(id=parent_id).first()
        if not target:
            raise NotFoundError("Comment to reply to not found")
        if (target.resource_type, target.resource_id) != (resource_type, resource_id):
            raise AppError("Reply must target a comment on the same item")
        # flatten: answering a reply still lands under its top-level comment
        comment.parent_id = target.parent_id or target.id
        comment.reply_to_id = target.id
        comment.reply_to_username = target.username

    db.add(comment)
    db.flush()

    if target is not None:
        notify(db, receiver=target.username, sender=user.username, type_="reply",
               comment=comment, content=content)

    db.commit()
    db.refresh(comment)
    logger.info(
        f"Comment {comment.id} created - {resource_type} {resource_id} | user: {user.username}"
        + (f" | reply to #{comment.reply_to_id}" if target is not None else "")
    )
    return comment


# --- Serialisation ---

def _user_cards(db: Session, usernames: Iterable[str]) -> Dict[str, Tuple[str, str]]:
    names = {u for u in usernames if u}
    if not names:
        return {}
    rows = db.query(User.username, User.nickname, User.avatar).filter(User.username.in_(names)).all()
    return {username: (nickname, avatar or "") for username, nickname, avatar in rows}


def _liked_ids(db: Session, viewer: Optional[User], comment_ids: Iterable[int]) -> Set[int]:
    ids = list(comment_ids)
    if viewer is None or not ids:
        return set()
    rows = (
        db.query(CommentLike.comment_id)
        .filter(CommentLike.username == viewer.username, CommentLike.comment_id.in_(ids))
        .all()
    )
    return {cid for cid, in rows}


def comment_to_dict(comment: Comment, cards: Dict[str, Tuple[str, str]], liked: Set[int]) -> dict:
    nickname, avatar = cards.get(comment.username, (comment.username, ""))
    data = {
        "id": comment.id,
        "resourceType": comment.resource_type,
        "resourceId": comment.resource_id,
        "username": comment.username,
        "nickname": nickname,
        "avatar": avatar,
        "content": comment.content,
        "createdAt": comment.created_at.isoformat() if comment.created_at else None,
        "likeCount": comment.like_count,
        "isLiked": comment.id in liked,
        "parentId": comment.parent_id,
        "replyTo": None,
    }
    if comment.reply_to_id is not None:
        reply_nick, _ = cards.get(comment.reply_to_username, (comment.reply_to_username, ""))
        data["replyTo"] = {
            "commentId": comment.reply_to_id,
            "username": comment.reply_to_username,
            "nickname": reply_nick,
        }
    return data


def _serialize(db: Session, comments: List[Comment], viewer: Optional[User]) -> List[dict]:
    cards = _user_cards(db, [c.username for c in comments] + [c.reply_to_username for c in comments])
    liked = _liked_ids(db, viewer, [c.id for c in comments])
    return [comment_to_dict(c, cards, liked) for c in comments]


# --- Listing ---

def list_comments(
    db: Session,
    resource_type: str,
    resource_id: str,
    page: int,
    page_size: int,
    sort: str = SORT_LATEST,
    viewer: Optional[User] = None,
) -> Tuple[List[dict], int]:
    """Top-level comments of one item with a preview of their replies."""
    if sort not in SORT_OPTIONS:
        raise AppError(f"sort must be one of: {', '.join(SORT_OPTIONS)}")
    ensure_resource(db, resource_type, resource_id)

    base = db.query(Comment).filter(
        Comment.resource_type == resource_type,
        Comment.resource_id == resource_id,
        Comment.parent_id.is_(None),
    )
    total = base.count()
    if sort == SORT_HOT:
        base = base.order_by(Comment.like_count.desc(), Comment.created_at.desc(), Comment.id.desc())
    else:
        base = base.order_by(Comment.created_at.desc(), Comment.id.desc())
    tops = base.offset((page - 1) * page_size).limit(page_size).all()
    if not tops:
        return [], total

    top_ids = [c.id for c in tops]
    reply_counts = dict(
        db.query(Comment.parent_id, func.count(Comment.id))
        .filter(Comment.parent_id.in_(top_ids))
        .group_by(Comment.parent_id)
        .all()
    )
    replies = (
        db.query(Comment)
        .filter(Comment.parent_id.in_(top_ids))
        .order_by(Comment.parent_id, Comment.created_at, Comment.id)
        .all()
    )
    preview: Dict[int, List[Comment]] = {}
    for reply in replies:
        bucket = preview.setdefault(reply.parent_id, [])
        if len(bucket) < REPLY_PREVIEW:
            bucket.append(reply)

    shown = tops + [r for bucket in preview.values() for r in bucket]
    serialized = {d["id"]: d for d in _serialize(db, shown, viewer)}

    items = []
    for top in tops:
        data = serialized[top.id]
        data["replyCount"] = reply_counts.get(top.id, 0)
        data["replies"] = [serialized[r.id] for r in preview.get(top.id, [])]
        items.append(data)
    return items, total


def list_replies(
    db: Session,
    comment_id: int,
    page: int,
    page_size: int,
    viewer: Optional[User] = None,
) -> Tuple[List[dict], int]:
    root = get_comment(db, comment_id)
    if root.parent_id is not None:
        raise AppError("Replies can only be listed for a top-level comment")

    base = db.query(Comment).filter(Comment.parent_id == root.id)
    total = base.count()
    replies = (
        base.order_by(Comment.created_at, Comment.id)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return _serialize(db, replies, viewer), total


# --- Delete / like ---

def delete_comment(db: Session, comment_id: int, user: User) -> int:
    """
    Deletes a comment together with its replies, the likes on all of them and
    every notification pointing at them. Returns how many comments went away.
    """
    comment = get_comment(db, comment_id)
    if comment.username != user.username:
        raise ForbiddenError("You can only delete your own comments")

    ids = [comment.id]
    if comment.parent_id is None:
        ids += [cid for cid, in db.query(Comment.id).filter(Comment.parent_id == comment.id).all()]
    else:
        # siblings that answered this reply now answer nothing that still exists
        db.query(Comment).filter(Comment.reply_to_id == comment.id).update(
            {Comment.reply_to_id: None, Comment.reply_to_username: None}, synchronize_session=False
        )

    db.query(Notification).filter(Notification.comment_id.in_(ids)).delete(synchronize_session=False)
    db.query(CommentLike).filter(CommentLike.comment_id.in_(ids)).delete(synchronize_session=False)
    db.query(Comment).filter(Comment.id.in_(ids), Comment.id != comment.id).delete(synchronize_session=False)
    db.delete(comment)
    db.commit()
    logger.info(f"Comment {comment_id} deleted by {user.username} - {len(ids)} comment(s) removed")
    return len(ids)


def like_comment(db: Session, comment_id: int, user: User) -> int:
    comment = get_comment(db, comment_id)
    exists = db.query(CommentLike).filter_by(comment_id=comment.id, username=user.username).first()
    if exists:
        raise ConflictError("You have already liked this comment")

    db.add(CommentLike(comment_id=comment.id, username=user.username))
    db.query(Comment).filter(Comment.id == comment.id).update(
        {Comment.like_count: Comment.like_count + 1}, synchronize_session=False
    )
    notify(db, receiver=comment.username, sender=user.username, type_="like",
           comment=comment, content=comment.content)
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment {comment.id} liked by {user.username} - likes: {comment.like_count}")
    return comment.like_count


def unlike_comment(db: Session, comment_id: int, user: User) -> int:
    comment = get_comment(db, comment_id)
    like = db.query(CommentLike).filter_by(comment_id=comment.id, username=user.username).first()
    if not like:
        raise NotFoundError("You have not liked this comment")

    db.delete(like)
    db.query(Comment).filter(Comment.id == comment.id, Comment.like_count > 0).update(
        {Comment.like_count: Comment.like_count - 1}, synchronize_session=False
    )
    # an unread "liked your comment" would now be stale
    db.query(Notification).filter(
        Notification.receiver == comment.username,
        Notification.sender == user.username,
        Notification.type == "like",
        Notification.comment_id == comment.id,
        Notification.is_read.is_(False),
    ).delete(synchronize_session=False)
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment {comment.id} unliked by {user.username} - likes: {comment.like_count}")
    return comment.like_count
