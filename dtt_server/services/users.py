import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..config import (
    USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH, PASSWORD_MIN_LENGTH,
    NICKNAME_MAX_LENGTH, AVATAR_MAX_LENGTH,
)
from ..errors import AppError, ConflictError
from ..models import User
from .security import hash_password, verify_password, create_token

logger = logging.getLogger(__name__)


def user_to_dict(user: User) -> dict:
    return {
        "username": user.username,
        "nickname": user.nickname,
        "avatar": user.avatar or "",
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }


def _check_password(password: str) -> None:
    if len(password) < PASSWORD_MIN_LENGTH:
        raise AppError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")


def _clean_nickname(nickname: Optional[str], fallback: str) -> str:
    nickname = (nickname or "").strip() or fallback
    if len(nickname) > NICKNAME_MAX_LENGTH:
        raise AppError(f"Nickname must be at most {NICKNAME_MAX_LENGTH} characters")
    return nickname


def register(db: Session, username: str, password: str, nickname: Optional[str] = None) -> User:
    username = (username or "").strip()
    if not username or not password:
        raise AppError("Username and password are required")
    if len(username) < USERNAME_MIN_LENGTH:
        raise AppError(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(username) > USERNAME_MAX_LENGTH:
        raise AppError(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
    _check_password(password)
    if db.query(User).filter_by(username=username).first():
        raise ConflictError("Username already exists")

    user = User(
        username=username,
        password_hash=hash_password(password),
        nickname=_clean_nickname(nickname, username),
        avatar="",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User registered - {username}")
    return user


def login(db: Session, username: str, password: str) -> dict:
    username = (username or "").strip()
    if not username or not password:
        raise AppError("Username and password are required")
    user = db.query(User).filter_by(username=username).first()
    if not user:
        raise AppError("Username does not exist")
    if not verify_password(password, user.password_hash):
        raise AppError("Wrong password")

    logger.info(f"User logged in - {username}")
    data = user_to_dict(user)
    data["token"] = create_token(user.username)
    return data


def update_profile(db: Session, user: User, nickname: Optional[str] = None, avatar: Optional[str] = None) -> User:
    if nickname is not None:
        user.nickname = _clean_nickname(nickname, user.username)
    if avatar is not None:
        avatar = avatar.strip()
        if len(avatar) > AVATAR_MAX_LENGTH:
            raise AppError(f"Avatar URL must be at most {AVATAR_MAX_LENGTH} characters")
        user.avatar = avatar
    db.commit()
    db.refresh(user)
    logger.info(f"Profile updated - {user.username}")
    return user


def change_password(db: Session, user: User, old_password: str, new_password: str) -> None:
    if not verify_password(old_password or "", user.password_hash):
        raise AppError("Wrong password")
    _check_password(new_password or "")
    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info(f"Password changed - {user.username}")
