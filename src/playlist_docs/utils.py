from __future__ import annotations

import hashlib
import os
import tempfile
import time
from pathlib import Path


FORBIDDEN_FILENAME_CHARS = frozenset('/\\:*?"<>|')

_HTML_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_MARKDOWN_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("|", "\\|"),
    ("[", "\\["),
    ("]", "\\]"),
)


def sanitize_stem(name: str) -> str:
    replaced = "".join("-" if char in FORBIDDEN_FILENAME_CHARS else char for char in name)
    return replaced.strip()


def sanitize_filename(name: str, extension: str) -> str:
    return f"{sanitize_stem(name)}.{extension}"


def escape_html(text: str) -> str:
    # "&" must be replaced first so the other entities are not escaped twice.
    for needle, replacement in _HTML_REPLACEMENTS:
        text = text.replace(needle, replacement)
    return text


def escape_markdown(text: str) -> str:
    for needle, replacement in _MARKDOWN_REPLACEMENTS:
        text = text.replace(needle, replacement)
    return text


def generate_run_id(prefix: str = "run") -> str:
    epoch_ms = int(time.time() * 1000)
    random_bits = hashlib.sha256(os.urandom(16)).hexdigest()[:8]
    return f"{prefix}-{epoch_ms}-{random_bits}"


def atomic_write(path: Path, data: str, encoding: str = "utf-8") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", delete=False, dir=path.parent, encoding=encoding, newline=""
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
