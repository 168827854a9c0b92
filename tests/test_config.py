import json
from pathlib import Path

import pytest

from playlist_docs.config import AppConfig, ConfigError, dump_config, load_config
from playlist_docs.settings import ENV_PREFIX, get_settings


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.toml")
    assert config.runtime.output_dir == Path("output")
    assert config.runtime.default_format == "markdown"
    assert config.runtime.log_file is None
    assert config.runtime.dedupe_filenames is False
    assert config.index.title == "My Spotify Playlists"


def test_load_config_reads_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        "[runtime]\n"
        'output_dir = "site"\n'
        'default_format = "html"\n'
        'log_file = "logs/log.jsonl"\n'
        "dedupe_filenames = true\n"
        "\n[index]\n"
        'title = "Our Playlists"\n',
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.runtime.output_dir == Path("site")
    assert config.runtime.default_format == "html"
    assert config.runtime.log_file == Path("logs/log.jsonl")
    assert config.runtime.dedupe_filenames is True
    assert config.index.title == "Our Playlists"


def test_dump_config_round_trips_values() -> None:
    payload = json.loads(dump_config(AppConfig()))
    assert payload["runtime"]["output_dir"] == "output"
    assert payload["runtime"]["log_file"] is None
    assert payload["index"]["title"] == "My Spotify Playlists"


def test_settings_read_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(f"{ENV_PREFIX}CONFIG_PATH", str(tmp_path / "custom.toml"))
    monkeypatch.setenv(f"{ENV_PREFIX}DEFAULT_FORMAT", "html")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.config_path == tmp_path / "custom.toml"
        assert settings.default_format == "html"
    finally:
        get_settings.cache_clear()


def test_load_config_rejects_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[runtime\n", encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        load_config(path)
    assert str(path) in str(exc.value)
