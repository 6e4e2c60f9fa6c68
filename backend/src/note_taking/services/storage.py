"""Upload directory: persist, read back and list uploaded files."""

from __future__ import annotations

import logging
from pathlib import Path

from .. import config

logger = logging.getLogger(__name__)


class InvalidFilenameError(ValueError):
    """Client-supplied filename cannot be stored inside the upload directory."""


def upload_dir() -> Path:
    return Path(config.UPLOAD_DIR)


def resolve_upload_path(filename: str) -> Path:
    """Join ``filename`` to the upload directory, rejecting anything that could escape it."""
    if not filename or filename in (".", "..") or "\x00" in filename:
        raise InvalidFilenameError(f"invalid filename: {filename!r}")
    if "/" in filename or "\\" in filename:
        raise InvalidFilenameError(f"filename must not contain a path separator: {filename!r}")
    base = upload_dir().resolve()
    path = (base / filename).resolve()
    if path.parent != base:
        raise InvalidFilenameError(f"filename resolves outside upload dir: {filename!r}")
    return path


def save_upload(filename: str, content: bytes) -> Path:
    """Write ``content`` verbatim under ``filename``. Overwrites an existing file."""
    path = resolve_upload_path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    logger.info("Saved upload %s (%d bytes)", path.name, len(content))
    return path


def read_upload(filename: str) -> bytes:
    return resolve_upload_path(filename).read_bytes()


def list_uploads() -> list[str]:
    """Names of regular entries in the upload directory, sorted. Raises if the directory is missing."""
    return sorted(entry.name for entry in upload_dir().iterdir() if not entry.is_dir())


def decode_text(content: bytes) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return content.decode("utf-8", errors="replace")
