"""Markdown to HTML for stored uploads (python-markdown)."""

from __future__ import annotations

import markdown

MARKDOWN_EXTENSIONS = ["extra"]


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
