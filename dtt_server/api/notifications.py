from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import NOTIFICATION_PAGE_SIZE
from ..database import get_db
from ..errors import ok
from ..models import User
from ..services import notifications
from ..services.paging import page_meta
from .deps import Pagination, get_current_user

router = APIRouter(prefix="/notifications")
notification_page = Pagination(NOTIFICATION_PAGE_SIZE)


@router.get("")
def list_notifications(
    unreadOnly: bool = Query(False),
    paging: tuple = Depends(notification_page),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    page, page_size = paging
    items, total = notifications.list_notifications(db, user, page, page_size, unread_only=unreadOnly)
    return ok(
        {
            "notifications": items,
            "unreadCount": notifications.unread_count(db, user),
            "pagination": page_meta(page, page_size, total),
        },
        "Notifications fetched",
    )


@router.get("/unread-count")
def unread_count(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ok({"unreadCount": notifications.unread_count(db, user)}, "Unread count fetched")


@router.put("/read-all")
def read_all(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    updated = notifications.mark_all_read(db, user)
    return ok({"updated": updated}, "All notifications marked as read")


@router.put("/{notification_id}/read")
def read_one(notification_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    notifications.mark_read(db, user, notification_id)
    return ok(None, "Notification marked as read")


@router.delete("/{notification_id}")
def delete_one(notification_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    notifications.delete_notification(db, user, notification_id)
    return ok(None, "Notification deleted")
