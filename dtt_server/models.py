from sqlalchemy import (
    Column, Integer, String, Text, DateTime, Float, Boolean, JSON,
    ForeignKey, Index, UniqueConstraint,
)
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


# --- Static catalog ---

class Album(Base):
    __tablename__ = "albums"

    id                  = Column(String(64), primary_key=True)
    name_cn             = Column(String(200), nullable=False)
    name_en             = Column(String(200), nullable=False)
    release_date        = Column(String(50), nullable=False)
    cover_url           = Column(String(500), nullable=False)
    album_detail        = Column(Text, nullable=False)
    creation_background = Column(Text, nullable=False)
    awards              = Column(JSON, default=list)
    language            = Column(String(50), default="普通话")
    record_label        = Column(String(200), nullable=False)


class Song(Base):
    __tablename__ = "songs"

    id           = Column(String(64), primary_key=True)
    album_id     = Column(String(64), index=True, nullable=False)
    track_number = Column(Integer, nullable=False)
    name_cn      = Column(String(200), nullable=False)
    name_en      = Column(String(200))
    lyricist     = Column(String(200), nullable=False)
    composer     = Column(String(200), nullable=False)
    arranger     = Column(String(200))
    duration     = Column(String(20))


class Single(Base):
    __tablename__ = "singles"

    id           = Column(String(64), primary_key=True)
    name_cn      = Column(String(200), nullable=False)
    release_date = Column(String(50), nullable=False)
    description  = Column(Text)


# --- Community ---

class User(Base):
    __tablename__ = "users"

    id            = Column(Integer, primary_key=True)
    username      = Column(String(30), unique=True, index=True, nullable=False)
    password_hash = Column(String(128), nullable=False)
    nickname      = Column(String(30), nullable=False)
    avatar        = Column(String(500), default="")
    created_at    = Column(DateTime, default=datetime.utcnow)


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("resource_type", "resource_id", "username", name="uq_rating_user_resource"),
    )

    id            = Column(Integer, primary_key=True)
    resource_type = Column(String(10), nullable=False)
    resource_id   = Column(String(64), nullable=False, index=True)
    username      = Column(String(30), nullable=False, index=True)
    score         = Column(Float, nullable=False)
    created_at    = Column(DateTime, default=datetime.utcnow)
    updated_at    = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Comment(Base):
    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_resource_created", "resource_type", "resource_id", "created_at"),
    )

    id                = Column(Integer, primary_key=True)
    resource_type     = Column(String(10), nullable=False)
    resource_id       = Column(String(64), nullable=False)
    username          = Column(String(30), nullable=False, index=True)
    content           = Column(String(500), nullable=False)
    # top-level comment this reply hangs under; NULL for top-level comments
    parent_id         = Column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), index=True)
    reply_to_id       = Column(Integer)
    reply_to_username = Column(String(30))
    like_count        = Column(Integer, default=0, nullable=False)
    created_at        = Column(DateTime, default=datetime.utcnow)


class CommentLike(Base):
    __tablename__ = "comment_likes"
    __table_args__ = (
        UniqueConstraint("comment_id", "username", name="uq_comment_like_user"),
    )

    id         = Column(Integer, primary_key=True)
    comment_id = Column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), index=True, nullable=False)
    username   = Column(String(30), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class Notification(Base):
    __tablename__ = "notifications"

    id            = Column(Integer, primary_key=True)
    receiver      = Column(String(30), nullable=False, index=True)
    sender        = Column(String(30), nullable=False)
    type          = Column(String(10), nullable=False)   # reply | like
    comment_id    = Column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), index=True)
    resource_type = Column(String(10))
    resource_id   = Column(String(64))
    content       = Column(String(200), default="")
    is_read       = Column(Boolean, default=False, nullable=False)
    created_at    = Column(DateTime, default=datetime.utcnow)
