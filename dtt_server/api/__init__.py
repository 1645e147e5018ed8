from fastapi import APIRouter

from . import catalog, comments, notifications, ratings, users

router = APIRouter(prefix="/api")
# ratings first: /songs/sort-by-rating must win over /songs/{song_id}
router.include_router(ratings.router)
router.include_router(catalog.router)
router.include_router(users.router)
router.include_router(comments.router)
router.include_router(notifications.router)
