from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str
    password: str
    nickname: Optional[str] = None


class LoginRequest(BaseModel):
    username: str
    password: str


class ProfileUpdate(BaseModel):
    nickname: Optional[str] = None
    avatar: Optional[str] = None


class PasswordChange(BaseModel):
    oldPassword: str
    newPassword: str


class RatingRequest(BaseModel):
    score: float


class CommentRequest(BaseModel):
    content: str
    parentId: Optional[int] = None
