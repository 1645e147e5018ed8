from enum import Enum


class ResourceKind(str, Enum):
    songs = "songs"
    singles = "singles"

    @property
    def resource_type(self) -> str:
        return "song" if self is ResourceKind.songs else "single"
