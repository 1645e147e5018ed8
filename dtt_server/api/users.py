from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import ok
from ..models import User
from ..schemas import LoginRequest, PasswordChange, ProfileUpdate, RegisterRequest
from ..services import users
from .deps import get_current_user

router = APIRouter(prefix="/user")


@router.post("/register")
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    user = users.register(db, body.username, body.password, body.nickname)
    return ok({"username": user.username, "nickname": user.nickname}, "Registered")


@router.post("/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return ok(users.login(db, body.username, body.password), "Logged in")


@router.get("/info")
def info(user: User = Depends(get_current_user)):
    return ok(users.user_to_dict(user), "User info fetched")


@router.put("/profile")
def update_profile(body: ProfileUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    user = users.update_profile(db, user, nickname=body.nickname, avatar=body.avatar)
    return ok(users.user_to_dict(user), "Profile updated")


@router.put("/password")
def change_password(body: PasswordChange, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    users.change_password(db, user, body.oldPassword, body.newPassword)
    return ok(None, "Password changed")
