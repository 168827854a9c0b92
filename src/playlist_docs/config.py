from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .renderers.base import DEFAULT_INDEX_TITLE


CONFIG_FILE = Path("config.toml")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(slots=True)
class RuntimeConfig:
    output_dir: Path = Path("output")
    default_format: str = "markdown"
    log_file: Path | None = None
    dedupe_filenames: bool = False


@dataclass(slots=True)
class IndexConfig:
    title: str = DEFAULT_INDEX_TITLE


@dataclass(slots=True)
class AppConfig:
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    index: IndexConfig = field(default_factory=IndexConfig)


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid configuration file {path}: {exc}") from exc


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    log_file = data.get("log_file")
    return RuntimeConfig(
        output_dir=Path(str(data.get("output_dir", "output"))),
        default_format=str(data.get("default_format", "markdown")),
        log_file=Path(str(log_file)) if log_file else None,
        dedupe_filenames=bool(data.get("dedupe_filenames", False)),
    )


def _build_index(data: Mapping[str, object] | None) -> IndexConfig:
    if not data:
        return IndexConfig()
    return IndexConfig(title=str(data.get("title", DEFAULT_INDEX_TITLE)))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or CONFIG_FILE
    raw = _read_toml(path)
    runtime_data = raw.get("runtime") if isinstance(raw, Mapping) else None
    index_data = raw.get("index") if isinstance(raw, Mapping) else None
    runtime = _build_runtime(runtime_data if isinstance(runtime_data, Mapping) else None)
    index = _build_index(index_data if isinstance(index_data, Mapping) else None)
    return AppConfig(runtime=runtime, index=index)


def dump_config(config: AppConfig) -> str:
    payload = {
        "runtime": {
            "output_dir": str(config.runtime.output_dir),
            "default_format": config.runtime.default_format,
            "log_file": str(config.runtime.log_file) if config.runtime.log_file else None,
            "dedupe_filenames": config.runtime.dedupe_filenames,
        },
        "index": {
            "title": config.index.title,
        },
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
