from __future__ import annotations

from functools import lru_cache
from typing import Dict, Type

from .base import DEFAULT_INDEX_TITLE, BaseRenderer, Renderer
from .html import HTMLRenderer
from .markdown import MarkdownRenderer
from .styles import COMMON_STYLES
from ..formats import OutputFormat

_RENDERER_CLASSES: Dict[OutputFormat, Type[BaseRenderer]] = {
    OutputFormat.MARKDOWN: MarkdownRenderer,
    OutputFormat.HTML: HTMLRenderer,
}


@lru_cache(maxsize=16)
def get_renderer(output_format: OutputFormat, index_title: str = DEFAULT_INDEX_TITLE) -> Renderer:
    renderer_cls = _RENDERER_CLASSES.get(output_format)
    if not renderer_cls:
        raise KeyError(f"No renderer registered for {output_format}")
    return renderer_cls(index_title)  # type: ignore[return-value]


__all__ = [
    "COMMON_STYLES",
    "HTMLRenderer",
    "MarkdownRenderer",
    "Renderer",
    "get_renderer",
]
