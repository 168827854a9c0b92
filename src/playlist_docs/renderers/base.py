from __future__ import annotations

from typing import Protocol, Sequence

from ..formats import OutputFormat
from ..schemas import Playlist

DEFAULT_INDEX_TITLE = "My Spotify Playlists"


class Renderer(Protocol):
    output_format: OutputFormat

    def render_playlist(self, playlist: Playlist) -> str:  # pragma: no cover - interface
        ...

    def render_index(
        self, playlists: Sequence[Playlist], filenames: Sequence[str]
    ) -> str:  # pragma: no cover - interface
        ...


class BaseRenderer:
    output_format: OutputFormat

    def __init__(self, index_title: str = DEFAULT_INDEX_TITLE) -> None:
        self.index_title = index_title

    @property
    def index_filename(self) -> str:
        return self.output_format.index_filename

    @staticmethod
    def total_tracks(playlists: Sequence[Playlist]) -> int:
        return sum(playlist.track_count for playlist in playlists)

    @staticmethod
    def pair_entries(
        playlists: Sequence[Playlist], filenames: Sequence[str]
    ) -> list[tuple[Playlist, str]]:
        # Callers must pass one filename per playlist; extra entries on either side are dropped.
        return list(zip(playlists, filenames))
