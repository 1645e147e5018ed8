from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import COMMENT_PAGE_SIZE
from ..database import get_db
from ..errors import ok
from ..models import User
from ..schemas import CommentRequest
from ..services import comments
from ..services.paging import page_meta
from .deps import Pagination, get_current_user, get_optional_user
from .resources import ResourceKind

router = APIRouter()
comment_page = Pagination(COMMENT_PAGE_SIZE)


@router.post("/{kind}/{resource_id}/comment")
def post_comment(
    kind: ResourceKind,
    resource_id: str,
    body: CommentRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    comment = comments.create_comment(db, kind.resource_type, resource_id, user, body.content, body.parentId)
    data = {
        "commentId": comment.id,
        "resourceType": comment.resource_type,
        "resourceId": comment.resource_id,
        "username": comment.username,
        "content": comment.content,
        "parentId": comment.parent_id,
        "replyToId": comment.reply_to_id,
        "replyToUsername": comment.reply_to_username,
        "createdAt": comment.created_at.isoformat() if comment.created_at else None,
    }
    return ok(data, "Reply posted" if comment.parent_id else "Comment posted")


@router.get("/{kind}/{resource_id}/comments")
def list_comments(
    kind: ResourceKind,
    resource_id: str,
    sort: str = Query(comments.SORT_LATEST),
    paging: tuple = Depends(comment_page),
    viewer: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
):
    page, page_size = paging
    items, total = comments.list_comments(db, kind.resource_type, resource_id, page, page_size, sort, viewer)
    return ok({"comments": items, "pagination": page_meta(page, page_size, total)}, "Comments fetched")


@router.get("/comments/{comment_id}/replies")
def list_replies(
    comment_id: int,
    paging: tuple = Depends(comment_page),
    viewer: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
):
    page, page_size = paging
    items, total = comments.list_replies(db, comment_id, page, page_size, viewer)
    return ok({"replies": items, "pagination": page_meta(page, page_size, total)}, "Replies fetched")


@router.delete("/comments/{comment_id}")
def delete_comment(comment_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    deleted = comments.delete_comment(db, comment_id, user)
    return ok({"deleted": deleted}, "Comment deleted")


@router.post("/comments/{comment_id}/like")
def like_comment(comment_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    like_count = comments.like_comment(db, comment_id, user)
    return ok({"commentId": comment_id, "likeCount": like_count, "isLiked": True}, "Liked")


@router.delete("/comments/{comment_id}/like")
def unlike_comment(comment_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    like_count = comments.unlike_comment(db, comment_id, user)
    return ok({"commentId": comment_id, "likeCount": like_count, "isLiked": False}, "Like removed")
