import logging
from typing import List

from sqlalchemy.orm import Session

from ..data import ALBUMS, SONGS, SINGLES
from ..errors import NotFoundError
from ..models import Album, Song, Single

logger = logging.getLogger(__name__)


RESOURCE_MODELS = {"song": Song, "single": Single}
RESOURCE_LABELS = {"song": "Song", "single": "Single"}


def seed_catalog(db: Session) -> dict:
    """
    Replaces albums, songs and singles with the bundled static data.
    Users, ratings, comments, likes and notifications are left untouched:
    they reference catalog items by id only.
    """
    deleted = {
        "albums": db.query(Album).delete(),
        "songs": db.query(Song).delete(),
        "singles": db.query(Single).delete(),
    }
    db.add_all(Album(**a) for a in ALBUMS)
    db.add_all(Song(**s) for s in SONGS)
    db.add_all(Single(**s) for s in SINGLES)
    db.commit()

    counts = {
        "albums": db.query(Album).count(),
        "songs": db.query(Song).count(),
        "singles": db.query(Single).count(),
    }
    logger.info(
        f"Catalog seeded - removed {deleted['albums']}/{deleted['songs']}/{deleted['singles']}, "
        f"now albums: {counts['albums']} | songs: {counts['songs']} | singles: {counts['singles']}"
    )
    return counts


# --- Serialisation ---

def album_to_dict(album: Album) -> dict:
    return {
        "id": album.id,
        "name_cn": album.name_cn,
        "name_en": album.name_en,
        "release_date": album.release_date,
        "cover_url": album.cover_url,
        "album_detail": album.album_detail,
        "creation_background": album.creation_background,
        "awards": list(album.awards or []),
        "language": album.language,
        "record_label": album.record_label,
    }


def song_to_dict(song: Song) -> dict:
    return {
        "id": song.id,
        "album_id": song.album_id,
        "track_number": song.track_number,
        "name_cn": song.name_cn,
        "name_en": song.name_en,
        "lyricist": song.lyricist,
        "composer": song.composer,
        "arranger": song.arranger,
        "duration": song.duration,
    }


def single_to_dict(single: Single) -> dict:
    return {
        "id": single.id,
        "name_cn": single.name_cn,
        "release_date": single.release_date,
        "description": single.description,
    }


# --- Queries ---

def list_albums(db: Session) -> List[Album]:
    return db.query(Album).order_by(Album.release_date, Album.id).all()


def get_album(db: Session, album_id: str) -> Album:
    album = db.query(Album).filter_by(id=album_id).first()
    if not album:
        raise NotFoundError("Album not found")
    return album


def list_album_songs(db: Session, album_id: str) -> List[Song]:
    get_album(db, album_id)
    return db.query(Song).filter_by(album_id=album_id).order_by(Song.track_number).all()


def get_song(db: Session, song_id: str) -> Song:
    song = db.query(Song).filter_by(id=song_id).first()
    if not song:
        raise NotFoundError("Song not found")
    return song


def list_singles(db: Session) -> List[Single]:
    # ids are single_YYYY_MM[_DD], so id order is release order
    return db.query(Single).order_by(Single.id).all()


def get_single(db: Session, single_id: str) -> Single:
    single = db.query(Single).filter_by(id=single_id).first()
    if not single:
        raise NotFoundError("Single not found")
    return single


def ensure_resource(db: Session, resource_type: str, resource_id: str):
    """Returns the song/single row or raises 404."""
    model = RESOURCE_MODELS[resource_type]
    row = db.query(model).filter_by(id=resource_id).first()
    if not row:
        raise NotFoundError(f"{RESOURCE_LABELS[resource_type]} not found")
    return row
