from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Iterator, Sequence

from .config import AppConfig
from .formats import FormatError, OutputFormat, parse_format
from .loader import LoadError, load_collection
from .logging import RunLogEntry, RunLogger, StageTimings
from .models import ExportResult, RenderedDocument, WrittenFile
from .renderers import Renderer, get_renderer
from .schemas import Playlist, PlaylistExport
from .utils import atomic_write, generate_run_id, sanitize_stem

ProgressCallback = Callable[[WrittenFile], None]
LoadedCallback = Callable[[PlaylistExport], None]


class ExportError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def filename_warnings(filenames: Sequence[str], index_filename: str) -> list[str]:
    warnings: list[str] = []
    seen: set[str] = {index_filename.casefold()}
    for filename in filenames:
        key = filename.casefold()
        if key in seen:
            warnings.append("DUPLICATE_FILENAME")
        seen.add(key)
        if not filename.rsplit(".", 1)[0]:
            warnings.append("EMPTY_FILENAME")
    return warnings


class ExportService:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    @property
    def config(self) -> AppConfig:
        return self._config

    def resolve_format(self, value: str | OutputFormat | None = None) -> OutputFormat:
        try:
            return parse_format(value if value is not None else self._config.runtime.default_format)
        except FormatError as exc:
            raise ExportError("INVALID_FORMAT", str(exc)) from exc

    def load(self, source: Path) -> PlaylistExport:
        try:
            return load_collection(source)
        except LoadError as exc:
            raise ExportError(exc.code, str(exc)) from exc

    def assign_filenames(
        self, playlists: Sequence[Playlist], output_format: OutputFormat
    ) -> list[str]:
        extension = output_format.extension
        dedupe = self._config.runtime.dedupe_filenames
        seen: set[str] = {output_format.index_filename.casefold()}
        filenames: list[str] = []
        for position, playlist in enumerate(playlists, start=1):
            stem = sanitize_stem(playlist.name)
            filename = f"{stem}.{extension}"
            if dedupe and filename.casefold() in seen:
                filename = f"{stem} ({position}).{extension}"
                attempt = 1
                while filename.casefold() in seen:
                    attempt += 1
                    filename = f"{stem} ({position}-{attempt}).{extension}"
            seen.add(filename.casefold())
            filenames.append(filename)
        return filenames

    def iter_documents(
        self, collection: PlaylistExport, output_format: OutputFormat
    ) -> Iterator[RenderedDocument]:
        """Yield one rendered document per playlist, in input order, then the index."""

        renderer = self._renderer(output_format)
        playlists = collection.playlists
        filenames = self.assign_filenames(playlists, output_format)
        for playlist, filename in zip(playlists, filenames):
            yield RenderedDocument(
                filename=filename,
                content=renderer.render_playlist(playlist),
                track_count=playlist.track_count,
            )
        yield RenderedDocument(
            filename=output_format.index_filename,
            content=renderer.render_index(playlists, filenames),
            track_count=collection.total_tracks,
            is_index=True,
        )

    def render_documents(
        self, collection: PlaylistExport, output_format: str | OutputFormat
    ) -> list[RenderedDocument]:
        return list(self.iter_documents(collection, self.resolve_format(output_format)))

    def export_collection(
        self,
        collection: PlaylistExport,
        output_dir: Path | None = None,
        output_format: str | OutputFormat | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> ExportResult:
        fmt = self.resolve_format(output_format)
        target_dir = Path(output_dir) if output_dir is not None else self._config.runtime.output_dir
        callback = progress or (lambda _: None)
        self._ensure_output_dir(target_dir)

        start = time.perf_counter()
        write_ms = 0.0
        written: list[WrittenFile] = []
        for document in self.iter_documents(collection, fmt):
            write_ms += self._write_document(target_dir / document.filename, document.content)
            entry = WrittenFile(
                filename=document.filename,
                path=target_dir / document.filename,
                track_count=document.track_count,
                is_index=document.is_index,
            )
            written.append(entry)
            callback(entry)
        total_ms = (time.perf_counter() - start) * 1000

        playlist_files = [entry.filename for entry in written if not entry.is_index]
        return ExportResult(
            output_dir=target_dir,
            output_format=fmt,
            index_path=target_dir / fmt.index_filename,
            files=written,
            playlist_count=len(collection.playlists),
            track_count=collection.total_tracks,
            warnings=filename_warnings(playlist_files, fmt.index_filename),
            timings=StageTimings(render_ms=max(total_ms - write_ms, 0.0), write_ms=write_ms),
        )

    def export(
        self,
        source: Path,
        output_dir: Path | None = None,
        output_format: str | OutputFormat | None = None,
        *,
        progress: ProgressCallback | None = None,
        on_loaded: LoadedCallback | None = None,
    ) -> ExportResult:
        fmt = self.resolve_format(output_format)
        target_dir = Path(output_dir) if output_dir is not None else self._config.runtime.output_dir
        run_id = generate_run_id("export")

        load_start = time.perf_counter()
        try:
            collection = self.load(source)
            load_ms = (time.perf_counter() - load_start) * 1000
            if on_loaded is not None:
                on_loaded(collection)
            result = self.export_collection(collection, target_dir, fmt, progress=progress)
        except ExportError as exc:
            self._log_run(run_id, source, fmt, target_dir, None, exc.code)
            raise

        if result.timings is not None:
            result.timings.load_ms = load_ms
        self._log_run(run_id, source, fmt, target_dir, result, None)
        return result

    def _renderer(self, output_format: OutputFormat) -> Renderer:
        return get_renderer(output_format, self._config.index.title)

    def _ensure_output_dir(self, output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportError(
                "WRITE_FAILED", f"Cannot create output directory {output_dir}: {exc}"
            ) from exc

    def _write_document(self, path: Path, content: str) -> float:
        write_start = time.perf_counter()
        try:
            atomic_write(path, content)
        except OSError as exc:
            raise ExportError("WRITE_FAILED", f"Cannot write {path}: {exc}") from exc
        return (time.perf_counter() - write_start) * 1000

    def _log_run(
        self,
        run_id: str,
        source: Path,
        output_format: OutputFormat,
        output_dir: Path,
        result: ExportResult | None,
        error_code: str | None,
    ) -> None:
        log_file = self._config.runtime.log_file
        if log_file is None:
            return
        RunLogger(log_file).append(
            RunLogEntry(
                run_id=run_id,
                source=str(source),
                status="success" if result is not None else "failure",
                output_format=output_format.value,
                output_dir=str(output_dir),
                files=[entry.filename for entry in result.files] if result else [],
                playlist_count=result.playlist_count if result else 0,
                track_count=result.track_count if result else 0,
                warnings=list(result.warnings) if result else [],
                error_code=error_code,
                timings=result.timings if result and result.timings else StageTimings(),
            )
        )


__all__ = [
    "ExportService",
    "ExportError",
    "ExportResult",
    "LoadedCallback",
    "ProgressCallback",
    "filename_warnings",
]
