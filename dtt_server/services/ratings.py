import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..config import ALLOWED_SCORES
from ..errors import AppError, NotFoundError
from ..models import Album, Rating, Single, Song
from .catalog import ensure_resource, get_album, single_to_dict, song_to_dict

logger = logging.getLogger(__name__)

# Placeholders shown in merged listings, same language as the catalog itself
UNKNOWN_ALBUM    = "未知专辑"
UNKNOWN_DATE     = "未知时间"
UNKNOWN_DURATION = "未知时长"
SINGLE_ALBUM     = "单曲"

Stats = Dict[Tuple[str, str], Tuple[float, int]]


def validate_score(score) -> float:
    try:
        value = float(score)
    except (TypeError, ValueError):
        raise AppError("Score must be a number")
    if value not in ALLOWED_SCORES:
        raise AppError("Score must be between 0.5 and 5 in half-star steps")
    return value


def submit_rating(db: Session, resource_type: str, resource_id: str, username: str, score) -> Tuple[Rating, bool]:
    """
    Создаёт или перезаписывает оценку пользователя.
    Возвращает (rating, created).
    """
    value = validate_score(score)
    ensure_resource(db, resource_type, resource_id)

    rating = db.query(Rating).filter_by(
        resource_type=resource_type, resource_id=resource_id, username=username
    ).first()
    created = rating is None
    if created:
        rating = Rating(resource_type=resource_type, resource_id=resource_id, username=username, score=value)
        db.add(rating)
    else:
        rating.score = value
    db.commit()
    db.refresh(rating)
    logger.info(
        f"Rating {'submitted' if created else 'updated'} - {resource_type} {resource_id} | user: {username} | score: {value}"
    )
    return rating, created


def retract_rating(db: Session, resource_type: str, resource_id: str, username: str) -> None:
    rating = db.query(Rating).filter_by(
        resource_type=resource_type, resource_id=resource_id, username=username
    ).first()
    if not rating:
        raise NotFoundError("You have not rated this item")
    db.delete(rating)
    db.commit()
    logger.info(f"Rating retracted - {resource_type} {resource_id} | user: {username}")


def user_score(db: Session, resource_type: str, resource_id: str, username: str) -> float:
    rating = db.query(Rating).filter_by(
        resource_type=resource_type, resource_id=resource_id, username=username
    ).first()
    return rating.score if rating else 0


def _round_half_up(value) -> float:
    # 3.25 -> 3.3, not banker's rounding
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def rating_stats(db: Session, resource_type: Optional[str] = None, resource_ids: Optional[Iterable[str]] = None) -> Stats:
    """
    AVG/COUNT grouped by (resource_type, resource_id).
    Averages are rounded to one decimal, as shown to users.
    """
    query = db.query(
        Rating.resource_type,
        Rating.resource_id,
        func.avg(Rating.score),
        func.count(Rating.id),
    )
    if resource_type is not None:
        query = query.filter(Rating.resource_type == resource_type)
    if resource_ids is not None:
        ids = list(resource_ids)
        if not ids:
            return {}
        query = query.filter(Rating.resource_id.in_(ids))
    rows = query.group_by(Rating.resource_type, Rating.resource_id).all()
    return {(rtype, rid): (_round_half_up(avg), int(cnt)) for rtype, rid, avg, cnt in rows}


def average_for(db: Session, resource_type: str, resource_id: str) -> dict:
    stats = rating_stats(db, resource_type, [resource_id])
    avg, cnt = stats.get((resource_type, resource_id), (0, 0))
    return {"averageScore": avg, "ratingCount": cnt}


def _with_stats(item: dict, resource_type: str, stats: Stats) -> dict:
    avg, cnt = stats.get((resource_type, item["id"]), (0, 0))
    item["averageScore"] = avg
    item["ratingCount"] = cnt
    return item


def _by_rating(item: dict):
    return (-item["averageScore"], -item["ratingCount"])


# --- Sorted listings (pagination happens in the router) ---

def album_songs_by_rating(db: Session, album_id: str) -> List[dict]:
    get_album(db, album_id)
    songs = db.query(Song).filter_by(album_id=album_id).order_by(Song.track_number).all()
    stats = rating_stats(db, "song", [s.id for s in songs])
    items = [_with_stats(song_to_dict(s), "song", stats) for s in songs]
    items.sort(key=lambda x: (-x["averageScore"], -x["ratingCount"], x["track_number"]))
    logger.debug(f"Album {album_id} songs by rating - songs: {len(items)} | rated: {len(stats)}")
    return items


def _songs_with_album(db: Session) -> List[dict]:
    rows = (
        db.query(Song, Album.name_cn, Album.release_date)
        .outerjoin(Album, Album.id == Song.album_id)
        .order_by(Song.album_id, Song.track_number)
        .all()
    )
    return [
        {
            "id": song.id,
            "name_cn": song.name_cn,
            "album_id": song.album_id,
            "album_name": album_name or UNKNOWN_ALBUM,
            "release_date": release_date or UNKNOWN_DATE,
            "duration": song.duration,
        }
        for song, album_name, release_date in rows
    ]


def songs_by_rating(db: Session) -> List[dict]:
    songs = _songs_with_album(db)
    if not songs:
        return []
    stats = rating_stats(db, "song", [s["id"] for s in songs])
    items = [_with_stats(s, "song", stats) for s in songs]
    items.sort(key=_by_rating)
    return items


def singles_by_rating(db: Session) -> List[dict]:
    singles = db.query(Single).order_by(Single.id).all()
    stats = rating_stats(db, "single", [s.id for s in singles])
    items = [_with_stats(single_to_dict(s), "single", stats) for s in singles]
    items.sort(key=_by_rating)
    return items


def all_resources_by_rating(db: Session) -> List[dict]:
    """Songs and singles in one list; ratings are matched on (type, id)."""
    resources = []
    for song in _songs_with_album(db):
        resources.append({
            "id": song["id"],
            "type": "song",
            "name_cn": song["name_cn"],
            "album_name": song["album_name"],
            "release_date": song["release_date"],
            "duration": song["duration"],
        })
    for single in db.query(Single).order_by(Single.id).all():
        resources.append({
            "id": single.id,
            "type": "single",
            "name_cn": single.name_cn,
            "album_name": SINGLE_ALBUM,
            "release_date": single.release_date,
            "duration": UNKNOWN_DURATION,
        })

    stats = rating_stats(db)
    items = [_with_stats(r, r["type"], stats) for r in resources]
    items.sort(key=_by_rating)
    return items
