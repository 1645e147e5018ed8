from .albums import ALBUMS
from .songs import SONGS
from .singles import SINGLES

__all__ = ["ALBUMS", "SONGS", "SINGLES"]
