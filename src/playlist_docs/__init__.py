"""Playlist export to Markdown and HTML document toolkit."""

from .config import AppConfig, load_config
from .core import ExportError, ExportService
from .formats import OutputFormat, parse_format
from .loader import LoadError, load_collection, parse_collection
from .models import ExportResult, RenderedDocument, WrittenFile
from .schemas import Item, Playlist, PlaylistExport, Track

__all__ = [
    "AppConfig",
    "load_config",
    "ExportError",
    "ExportService",
    "ExportResult",
    "Item",
    "LoadError",
    "OutputFormat",
    "Playlist",
    "PlaylistExport",
    "RenderedDocument",
    "Track",
    "WrittenFile",
    "load_collection",
    "parse_collection",
    "parse_format",
]
