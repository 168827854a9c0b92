from __future__ import annotations

import json
from pathlib import Path

import pytest

from playlist_docs.schemas import Playlist, PlaylistExport

ROAD_TRIP_JSON = (
    '{"playlists":[{"name":"Road/Trip","lastModifiedDate":"2023-01-01","collaborators":[],'
    '"items":[{"track":{"trackName":"A & B","artistName":"X","albumName":"Y",'
    '"trackUri":"spotify:track:1"},"episode":null,"audiobook":null,"localTrack":null,'
    '"addedDate":"2023-01-02"}],"description":null,"numberOfFollowers":5}]}'
)


def make_item(
    name: str = "Song",
    artist: str = "Artist",
    album: str = "Album",
    uri: str = "spotify:track:abc",
    added: str = "2024-02-03",
) -> dict[str, object]:
    return {
        "track": {
            "trackName": name,
            "artistName": artist,
            "albumName": album,
            "trackUri": uri,
        },
        "episode": None,
        "audiobook": None,
        "localTrack": None,
        "addedDate": added,
    }


def make_playlist(
    name: str = "Chill",
    items: list[dict[str, object]] | None = None,
    followers: int = 0,
    modified: str = "2024-01-01",
) -> dict[str, object]:
    return {
        "name": name,
        "lastModifiedDate": modified,
        "collaborators": [],
        "items": items if items is not None else [],
        "description": None,
        "numberOfFollowers": followers,
    }


def build_playlist(**kwargs: object) -> Playlist:
    return Playlist.model_validate(make_playlist(**kwargs))  # type: ignore[arg-type]


def build_export(*playlists: dict[str, object]) -> PlaylistExport:
    return PlaylistExport.model_validate({"playlists": list(playlists)})


@pytest.fixture
def road_trip_file(tmp_path: Path) -> Path:
    source = tmp_path / "playlists.json"
    source.write_text(ROAD_TRIP_JSON, encoding="utf-8")
    return source


@pytest.fixture
def write_export(tmp_path: Path):
    def _write(*playlists: dict[str, object]) -> Path:
        source = tmp_path / "export.json"
        source.write_text(json.dumps({"playlists": list(playlists)}), encoding="utf-8")
        return source

    return _write
