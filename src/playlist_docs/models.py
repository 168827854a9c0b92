"""Result types for playlist export runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .formats import OutputFormat
from .logging import StageTimings


@dataclass(slots=True)
class RenderedDocument:
    """A rendered document ready to be written under the output directory."""

    filename: str
    content: str
    track_count: int = 0
    is_index: bool = False


@dataclass(slots=True)
class WrittenFile:
    filename: str
    path: Path
    track_count: int
    is_index: bool = False


@dataclass(slots=True)
class ExportResult:
    """Outcome of a complete export run."""

    output_dir: Path
    output_format: OutputFormat
    index_path: Path
    files: list[WrittenFile]
    playlist_count: int
    track_count: int
    warnings: list[str] = field(default_factory=list)
    timings: StageTimings | None = None

    @property
    def summary(self) -> str:
        return f"Generated {self.playlist_count} {self.output_format.value} files plus index."


__all__ = ["RenderedDocument", "WrittenFile", "ExportResult"]
