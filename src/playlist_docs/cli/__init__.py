from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, ConfigError, dump_config, load_config
from ..core import ExportError, ExportService
from ..models import WrittenFile
from ..schemas import PlaylistExport
from ..settings import get_settings

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Convert Spotify playlist exports to Markdown or HTML documents")


def _load_config(path: Path | None) -> AppConfig:
    try:
        return load_config(path or get_settings().config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error[/red]: {escape(str(exc))}")
        raise typer.Exit(1) from exc


def _requested_format(value: str | None) -> str | None:
    return value if value is not None else get_settings().default_format


def _fail(exc: ExportError) -> typer.Exit:
    err_console.print(f"[red]Export failed[/red]: {exc.code} - {escape(str(exc))}")
    return typer.Exit(1)


def _report_loaded(collection: PlaylistExport) -> None:
    console.print(f"\nProcessing {len(collection.playlists)} playlists...")


def _report_written(entry: WrittenFile) -> None:
    if entry.is_index:
        console.print(f"\n  [green]✓[/green] Created: {escape(entry.filename)}")
    else:
        console.print(
            f"  [green]✓[/green] Created: {escape(entry.filename)} ({entry.track_count} tracks)"
        )


@app.command()
def convert(
    input_file: Path = typer.Option(..., "--input", "-i", help="Input JSON file path"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory for files"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: markdown or html"
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    cfg = _load_config(config)
    service = ExportService(cfg)
    try:
        fmt = service.resolve_format(_requested_format(output_format))
    except ExportError as exc:
        raise _fail(exc) from exc

    target_dir = output or cfg.runtime.output_dir
    console.print(f"Reading JSON file: {escape(str(input_file))}")
    console.print(f"Output directory: {escape(str(target_dir))}")
    console.print(f"Output format: {fmt.value}")
    try:
        result = service.export(
            input_file, target_dir, fmt, progress=_report_written, on_loaded=_report_loaded
        )
    except ExportError as exc:
        raise _fail(exc) from exc

    for warning in sorted(set(result.warnings)):
        count = result.warnings.count(warning)
        err_console.print(f"[yellow]Warning[/yellow]: {warning} x{count}")
    console.print(f"\n[green]Done![/green] {result.summary}")
    console.print(f"Open {escape(str(result.index_path))} to get started!")


@app.command()
def inspect(
    input_file: Path = typer.Argument(..., help="Input JSON file path"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format used to derive file names"
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    cfg = _load_config(config)
    service = ExportService(cfg)
    try:
        fmt = service.resolve_format(_requested_format(output_format))
        collection = service.load(input_file)
    except ExportError as exc:
        raise _fail(exc) from exc

    filenames = service.assign_filenames(collection.playlists, fmt)
    table = Table(title=escape(cfg.index.title))
    table.add_column("#", justify="right")
    table.add_column("Playlist")
    table.add_column("Tracks", justify="right")
    table.add_column("Followers", justify="right")
    table.add_column("File")
    for position, (playlist, filename) in enumerate(zip(collection.playlists, filenames), start=1):
        table.add_row(
            str(position),
            escape(playlist.name),
            str(playlist.track_count),
            str(playlist.number_of_followers),
            escape(filename),
        )
    console.print(table)
    console.print(
        f"Total playlists: {len(collection.playlists)}, total tracks: {collection.total_tracks}"
    )


@app.command("show-config")
def show_config(
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    console.print_json(dump_config(_load_config(config)))


if __name__ == "__main__":
    app()
