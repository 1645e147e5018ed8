from typing import Optional

from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..config import MAX_PAGE_SIZE
from ..database import get_db
from ..errors import AuthError
from ..models import User
from ..services.security import decode_token

bearer = HTTPBearer(auto_error=False)


def _resolve_user(credentials: Optional[HTTPAuthorizationCredentials], db: Session) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthError("Not logged in")
    username = decode_token(credentials.credentials)
    user = db.query(User).filter_by(username=username).first()
    if not user:
        raise AuthError("User no longer exists")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    return _resolve_user(credentials, db)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> Optional[User]:
    # public endpoints: a bad or missing token just means "anonymous"
    if credentials is None:
        return None
    try:
        return _resolve_user(credentials, db)
    except AuthError:
        return None


class Pagination:
    def __init__(self, default_size: int):
        self.default_size = default_size

    def __call__(
        self,
        page: int = Query(1, ge=1),
        pageSize: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    ) -> tuple:
        return page, pageSize or self.default_size
