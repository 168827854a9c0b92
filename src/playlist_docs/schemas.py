"""Input data model for a playlist export document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ExportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)


class Track(_ExportModel):
    track_name: str
    artist_name: str
    album_name: str
    track_uri: str


class Item(_ExportModel):
    track: Track
    added_date: str
    episode: Any = None
    audiobook: Any = None
    local_track: Any = None


class Playlist(_ExportModel):
    name: str
    last_modified_date: str
    items: list[Item]
    number_of_followers: int
    collaborators: list[Any] = []
    description: Any = None

    @property
    def track_count(self) -> int:
        return len(self.items)


class PlaylistExport(_ExportModel):
    playlists: list[Playlist]

    @property
    def total_tracks(self) -> int:
        return sum(playlist.track_count for playlist in self.playlists)


__all__ = ["Track", "Item", "Playlist", "PlaylistExport"]
