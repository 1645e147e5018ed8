from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import ok
from ..services import catalog

router = APIRouter()


@router.get("/albums")
def list_albums(db: Session = Depends(get_db)):
    albums = catalog.list_albums(db)
    return ok([catalog.album_to_dict(a) for a in albums], "Albums fetched")


@router.get("/albums/{album_id}")
def get_album(album_id: str, db: Session = Depends(get_db)):
    return ok(catalog.album_to_dict(catalog.get_album(db, album_id)), "Album fetched")


@router.get("/albums/{album_id}/songs")
def list_album_songs(album_id: str, db: Session = Depends(get_db)):
    songs = catalog.list_album_songs(db, album_id)
    return ok([catalog.song_to_dict(s) for s in songs], "Album songs fetched")


@router.get("/songs/{song_id}")
def get_song(song_id: str, db: Session = Depends(get_db)):
    return ok(catalog.song_to_dict(catalog.get_song(db, song_id)), "Song fetched")


@router.get("/singles")
def list_singles(db: Session = Depends(get_db)):
    singles = catalog.list_singles(db)
    return ok([catalog.single_to_dict(s) for s in singles], "Singles fetched")


@router.get("/singles/{single_id}")
def get_single(single_id: str, db: Session = Depends(get_db)):
    return ok(catalog.single_to_dict(catalog.get_single(db, single_id)), "Single fetched")
