from __future__ import annotations

from typing import Sequence

from .base import BaseRenderer
from ..formats import OutputFormat
from ..schemas import Item, Playlist
from ..utils import escape_markdown

TABLE_HEADER = "| # | Track Name | Artist | Album | Added Date |\n"
TABLE_DIVIDER = "|---|------------|--------|-------|------------|\n"


class MarkdownRenderer(BaseRenderer):
    output_format = OutputFormat.MARKDOWN

    def render_playlist(self, playlist: Playlist) -> str:
        back_link = f"[← Back to Index]({self.index_filename})"
        parts = [
            f"# {playlist.name}\n\n",
            f"{back_link}\n\n",
            "## Playlist Information\n\n",
            f"- **Last Modified:** {playlist.last_modified_date}\n",
            f"- **Followers:** {playlist.number_of_followers}\n",
            f"- **Total Tracks:** {playlist.track_count}\n\n",
        ]
        if playlist.items:
            parts.append("## Tracks\n\n")
            parts.append(TABLE_HEADER)
            parts.append(TABLE_DIVIDER)
            parts.extend(
                self._track_row(position, item)
                for position, item in enumerate(playlist.items, start=1)
            )
        parts.append("\n[↑ Back to Top](#)\n\n")
        parts.append(f"{back_link}\n")
        return "".join(parts)

    def _track_row(self, position: int, item: Item) -> str:
        track = item.track
        return (
            f"| {position} "
            f"| [{escape_markdown(track.track_name)}]({track.track_uri}) "
            f"| {escape_markdown(track.artist_name)} "
            f"| {escape_markdown(track.album_name)} "
            f"| {item.added_date} |\n"
        )

    def render_index(self, playlists: Sequence[Playlist], filenames: Sequence[str]) -> str:
        parts = [
            f"# {self.index_title}\n\n",
            f"**Total Playlists:** {len(playlists)}\n\n",
            f"**Total Tracks:** {self.total_tracks(playlists)}\n\n",
            "## Playlists\n\n",
        ]
        for playlist, filename in self.pair_entries(playlists, filenames):
            parts.append(
                f"- [**{playlist.name}**]({filename}) - "
                f"{playlist.track_count} tracks, {playlist.number_of_followers} followers\n"
            )
        return "".join(parts)
