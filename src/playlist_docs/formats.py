from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def extension(self) -> str:
        return EXTENSION_MAP[self]

    @property
    def index_filename(self) -> str:
        return f"index.{self.extension}"


EXTENSION_MAP: dict[OutputFormat, str] = {
    OutputFormat.MARKDOWN: "md",
    OutputFormat.HTML: "html",
}


class FormatError(ValueError):
    """Raised when an output format selector is not recognised."""


def parse_format(value: str | OutputFormat) -> OutputFormat:
    if isinstance(value, OutputFormat):
        return value
    normalized = str(value).lower()
    try:
        return OutputFormat(normalized)
    except ValueError as exc:
        raise FormatError("format must be either 'markdown' or 'html'") from exc


__all__ = ["OutputFormat", "FormatError", "parse_format"]
