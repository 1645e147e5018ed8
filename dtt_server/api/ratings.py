from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import RATING_PAGE_SIZE
from ..database import get_db
from ..errors import ok
from ..models import User
from ..schemas import RatingRequest
from ..services import ratings
from ..services.paging import page_meta, slice_page
from .deps import Pagination, get_current_user
from .resources import ResourceKind

router = APIRouter()
rating_page = Pagination(RATING_PAGE_SIZE)


def _paginated(key: str, items: list, page: int, page_size: int) -> dict:
    return {key: slice_page(items, page, page_size), "pagination": page_meta(page, page_size, len(items))}


# --- Sorted listings ---

@router.get("/albums/{album_id}/songs/sort-by-rating")
def album_songs_by_rating(album_id: str, paging: tuple = Depends(rating_page), db: Session = Depends(get_db)):
    page, page_size = paging
    items = ratings.album_songs_by_rating(db, album_id)
    return ok(_paginated("songs", items, page, page_size), "Album songs sorted by rating")


@router.get("/songs/sort-by-rating")
def songs_by_rating(paging: tuple = Depends(rating_page), db: Session = Depends(get_db)):
    page, page_size = paging
    return ok(_paginated("songs", ratings.songs_by_rating(db), page, page_size), "Songs sorted by rating")


@router.get("/singles/sort-by-rating")
def singles_by_rating(paging: tuple = Depends(rating_page), db: Session = Depends(get_db)):
    page, page_size = paging
    return ok(_paginated("singles", ratings.singles_by_rating(db), page, page_size), "Singles sorted by rating")


@router.get("/all-resources/sort-by-rating")
def all_resources_by_rating(paging: tuple = Depends(rating_page), db: Session = Depends(get_db)):
    page, page_size = paging
    items = ratings.all_resources_by_rating(db)
    return ok(_paginated("resources", items, page, page_size), "Songs and singles sorted by rating")


# --- Per-resource rating ---

@router.post("/{kind}/{resource_id}/rating")
def submit_rating(
    kind: ResourceKind,
    resource_id: str,
    body: RatingRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    rating, created = ratings.submit_rating(db, kind.resource_type, resource_id, user.username, body.score)
    return ok(
        {
            "resourceType": rating.resource_type,
            "resourceId": rating.resource_id,
            "username": rating.username,
            "score": rating.score,
        },
        "Rating submitted" if created else "Rating updated",
    )


@router.delete("/{kind}/{resource_id}/rating")
def retract_rating(
    kind: ResourceKind,
    resource_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ratings.retract_rating(db, kind.resource_type, resource_id, user.username)
    return ok(None, "Rating removed")


@router.get("/{kind}/{resource_id}/rating/average")
def average_rating(kind: ResourceKind, resource_id: str, db: Session = Depends(get_db)):
    return ok(ratings.average_for(db, kind.resource_type, resource_id), "Average rating fetched")


@router.get("/user/{kind}/{resource_id}/rating")
def my_rating(
    kind: ResourceKind,
    resource_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    score = ratings.user_score(db, kind.resource_type, resource_id, user.username)
    return ok({"score": score}, "Your rating fetched")
