import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from ..config import SNIPPET_LENGTH
from ..errors import NotFoundError
from ..models import Comment, Notification, User

logger = logging.getLogger(__name__)


def snippet(text: str, length: int = SNIPPET_LENGTH) -> str:
    text = (text or "").strip()
    return text if len(text) <= length else text[:length] + "..."


def notify(
    db: Session,
    receiver: str,
    sender: str,
    type_: str,
    comment: Comment,
    content: str = "",
) -> Optional[Notification]:
    """
    Adds a notification to the session; the caller commits.
    Nobody is notified about their own actions.
    """
    if receiver == sender:
        return None
    notification = Notification(
        receiver=receiver,
        sender=sender,
        type=type_,
        comment_id=comment.id,
        resource_type=comment.resource_type,
        resource_id=comment.resource_id,
        content=snippet(content),
        is_read=False,
    )
    db.add(notification)
    logger.debug(f"Notification queued - {type_} from {sender} to {receiver} on comment {comment.id}")
    return notification


def notification_to_dict(n: Notification, cards: dict) -> dict:
    nickname, avatar = cards.get(n.sender, (n.sender, ""))
    return {
        "id": n.id,
        "type": n.type,
        "sender": n.sender,
        "senderNickname": nickname,
        "senderAvatar": avatar,
        "commentId": n.comment_id,
        "resourceType": n.resource_type,
        "resourceId": n.resource_id,
        "content": n.content,
        "isRead": bool(n.is_read),
        "createdAt": n.created_at.isoformat() if n.created_at else None,
    }


def unread_count(db: Session, user: User) -> int:
    return db.query(Notification).filter(
        Notification.receiver == user.username, Notification.is_read.is_(False)
    ).count()


def list_notifications(
    db: Session, user: User, page: int, page_size: int, unread_only: bool = False
) -> Tuple[List[dict], int]:
    base = db.query(Notification).filter(Notification.receiver == user.username)
    if unread_only:
        base = base.filter(Notification.is_read.is_(False))
    total = base.count()
    rows = (
        base.order_by(Notification.created_at.desc(), Notification.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    senders = {n.sender for n in rows}
    cards = {}
    if senders:
        cards = {
            username: (nickname, avatar or "")
            for username, nickname, avatar in db.query(User.username, User.nickname, User.avatar)
            .filter(User.username.in_(senders))
            .all()
        }
    return [notification_to_dict(n, cards) for n in rows], total


def _own_notification(db: Session, user: User, notification_id: int) -> Notification:
    n = db.query(Notification).filter_by(id=notification_id, receiver=user.username).first()
    if not n:
        raise NotFoundError("Notification not found")
    return n


def mark_read(db: Session, user: User, notification_id: int) -> None:
    n = _own_notification(db, user, notification_id)
    if not n.is_read:
        n.is_read = True
        db.commit()
        logger.info(f"Notification {notification_id} read by {user.username}")


def mark_all_read(db: Session, user: User) -> int:
    updated = db.query(Notification).filter(
        Notification.receiver == user.username, Notification.is_read.is_(False)
    ).update({Notification.is_read: True}, synchronize_session=False)
    db.commit()
    logger.info(f"All notifications read by {user.username} - {updated} updated")
    return updated


def delete_notification(db: Session, user: User, notification_id: int) -> None:
    n = _own_notification(db, user, notification_id)
    db.delete(n)
    db.commit()
    logger.info(f"Notification {notification_id} deleted by {user.username}")
