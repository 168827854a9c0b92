from __future__ import annotations

from typing import Sequence

from .base import BaseRenderer
from .styles import COMMON_STYLES, INDEX_STYLES, PLAYLIST_STYLES
from ..formats import OutputFormat
from ..schemas import Item, Playlist
from ..utils import escape_html

TRACK_COLUMNS = ("Track Name", "Artist", "Album", "Added Date")


class HTMLRenderer(BaseRenderer):
    output_format = OutputFormat.HTML

    def _head(self, title: str, page_styles: str) -> list[str]:
        return [
            "<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n",
            "    <meta charset=\"UTF-8\">\n",
            "    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\">\n",
            f"    <title>{escape_html(title)}</title>\n",
            "    <style>\n",
            COMMON_STYLES,
            page_styles,
            "    </style>\n",
            "</head>\n<body>\n",
            "    <div class=\"container\">\n",
        ]

    def render_playlist(self, playlist: Playlist) -> str:
        parts = self._head(playlist.name, PLAYLIST_STYLES)
        parts.append(
            f"        <a href=\"{self.index_filename}\" class=\"nav-link\">← Back to Index</a>\n"
        )
        parts.append(f"        <h1>{escape_html(playlist.name)}</h1>\n")
        parts.extend(
            [
                "        <div class=\"metadata\">\n",
                "            <p><strong>Last Modified:</strong> "
                f"{escape_html(playlist.last_modified_date)}</p>\n",
                f"            <p><strong>Followers:</strong> {playlist.number_of_followers}</p>\n",
                f"            <p><strong>Total Tracks:</strong> {playlist.track_count}</p>\n",
                "        </div>\n",
            ]
        )
        if playlist.items:
            parts.extend(self._track_table(playlist.items))
        parts.append("    </div>\n")
        parts.append(
            f"    <a href=\"{self.index_filename}\" class=\"nav-link\">← Back to Index</a>\n"
        )
        parts.append("    <a href=\"#\" class=\"back-to-top\">↑ Top</a>\n")
        parts.append("</body>\n</html>")
        return "".join(parts)

    def _track_table(self, items: Sequence[Item]) -> list[str]:
        parts = [
            "        <h2>Tracks</h2>\n",
            "        <table>\n",
            "            <thead>\n",
            "                <tr>\n",
            "                    <th class=\"track-number\">#</th>\n",
        ]
        parts.extend(f"                    <th>{column}</th>\n" for column in TRACK_COLUMNS)
        parts.append("                </tr>\n")
        parts.append("            </thead>\n")
        parts.append("            <tbody>\n")
        for position, item in enumerate(items, start=1):
            track = item.track
            # The URI is written into href as-is; only text content is escaped.
            parts.extend(
                [
                    "                <tr>\n",
                    f"                    <td class=\"track-number\">{position}</td>\n",
                    f"                    <td><a href=\"{track.track_uri}\">"
                    f"{escape_html(track.track_name)}</a></td>\n",
                    f"                    <td>{escape_html(track.artist_name)}</td>\n",
                    f"                    <td>{escape_html(track.album_name)}</td>\n",
                    f"                    <td>{escape_html(item.added_date)}</td>\n",
                    "                </tr>\n",
                ]
            )
        parts.append("            </tbody>\n")
        parts.append("        </table>\n")
        return parts

    def render_index(self, playlists: Sequence[Playlist], filenames: Sequence[str]) -> str:
        parts = self._head(self.index_title, INDEX_STYLES)
        parts.append(f"        <h1>{escape_html(self.index_title)}</h1>\n")
        parts.extend(
            [
                "        <div class=\"stats\">\n",
                *self._stat_card("Total Playlists", len(playlists)),
                *self._stat_card("Total Tracks", self.total_tracks(playlists)),
                "        </div>\n",
            ]
        )
        parts.append("        <h2>Playlists</h2>\n")
        parts.append("        <div class=\"playlist-grid\">\n")
        for playlist, filename in self.pair_entries(playlists, filenames):
            parts.extend(
                [
                    "            <div class=\"playlist-card\">\n",
                    f"                <h3><a href=\"{escape_html(filename)}\">"
                    f"{escape_html(playlist.name)}</a></h3>\n",
                    "                <div class=\"playlist-meta\">\n",
                    f"                    {playlist.track_count} tracks<br>\n",
                    f"                    {playlist.number_of_followers} followers\n",
                    "                </div>\n",
                    "            </div>\n",
                ]
            )
        parts.append("        </div>\n")
        parts.append("    </div>\n")
        parts.append("</body>\n</html>")
        return "".join(parts)

    @staticmethod
    def _stat_card(label: str, value: int) -> list[str]:
        return [
            "            <div class=\"stat-card\">\n",
            f"                <h3>{label}</h3>\n",
            f"                <p>{value}</p>\n",
            "            </div>\n",
        ]
