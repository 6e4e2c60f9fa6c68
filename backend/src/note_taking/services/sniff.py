"""Content-type sniffing for uploads (WHATWG MIME sniffing, the subset browsers and servers share).

Only the first 512 bytes are considered. Text that contains no binary control
bytes and matches no known signature is reported as ``text/plain; charset=utf-8``.
"""

from __future__ import annotations

SNIFF_LEN = 512
PLAIN_TEXT_UTF8 = "text/plain; charset=utf-8"
OCTET_STREAM = "application/octet-stream"

_WHITESPACE = b"\t\n\x0c\r "

# Matched case-insensitively after leading whitespace; must be followed by a space or ">".
_HTML_PREFIXES = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)

_EXACT_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", PLAIN_TEXT_UTF8),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"\x00\x00\x02\x00", "image/x-icon"),
    (b"BM", "image/bmp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b".snd", "audio/basic"),
    (b"ID3", "audio/mpeg"),
    (b"OggS\x00", "application/ogg"),
    (b"MThd\x00\x00\x00\x06", "audio/midi"),
    (b"\x1a\x45\xdf\xa3", "video/webm"),
    (b"\x00\x01\x00\x00", "font/ttf"),
    (b"OTTO", "font/otf"),
    (b"ttcf", "font/collection"),
    (b"wOFF", "font/woff"),
    (b"wOF2", "font/woff2"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
    (b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    (b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
)

# Container formats: a 4-byte tag, 4 ignored size bytes, then the form type.
_CONTAINER_FORMATS: tuple[tuple[bytes, bytes, str], ...] = (
    (b"RIFF", b"WEBPVP", "image/webp"),
    (b"RIFF", b"WAVE", "audio/wave"),
    (b"RIFF", b"AVI ", "video/avi"),
    (b"FORM", b"AIFF", "audio/aiff"),
)

_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


def _is_html(data: bytes) -> bool:
    upper = data.upper()
    for prefix in _HTML_PREFIXES:
        if upper.startswith(prefix) and len(data) > len(prefix):
            if data[len(prefix)] in b" >":
                return True
    return False


def _is_mp4(data: bytes) -> bool:
    """ISO base media file: an `ftyp` box whose brands include one starting with `mp4`."""
    if len(data) < 12:
        return False
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0 or data[4:8] != b"ftyp":
        return False
    for start in range(8, box_size, 4):
        if start == 12:
            continue  # minor version
        if data[start : start + 3] == b"mp4":
            return True
    return False


def detect_content_type(data: bytes) -> str:
    """Return the sniffed MIME type of ``data``. Never raises."""
    data = data[:SNIFF_LEN]
    stripped = data.lstrip(_WHITESPACE)

    if _is_html(stripped):
        return "text/html; charset=utf-8"
    if stripped.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"

    for signature, content_type in _EXACT_SIGNATURES:
        if data.startswith(signature):
            return content_type
    for tag, form_type, content_type in _CONTAINER_FORMATS:
        if data.startswith(tag) and data[8:].startswith(form_type):
            return content_type
    if _is_mp4(data):
        return "video/mp4"
    if len(data) >= 36 and data[34:36] == b"LP":
        return "application/vnd.ms-fontobject"

    if any(b in _BINARY_BYTES for b in data):
        return OCTET_STREAM
    return PLAIN_TEXT_UTF8
