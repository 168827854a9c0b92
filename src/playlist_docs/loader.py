from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .schemas import PlaylistExport


class LoadError(RuntimeError):
    """Raised when an export document cannot be read or does not match the schema."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def parse_collection(text: str | bytes) -> PlaylistExport:
    try:
        return PlaylistExport.model_validate_json(text, strict=True)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise LoadError(
            "INVALID_SCHEMA",
            f"Invalid playlist export at {location}: {first.get('msg', 'validation failed')}",
        ) from exc


def load_collection(path: Path) -> PlaylistExport:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError("READ_FAILED", f"Cannot read input file {path}: {exc}") from exc
    return parse_collection(text)


__all__ = ["LoadError", "load_collection", "parse_collection"]
