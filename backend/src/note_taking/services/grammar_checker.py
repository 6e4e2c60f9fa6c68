"""LanguageTool client: submit text, turn matches into readable suggestions."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .. import config
from ..models import GrammarCheckResult, GrammarMatch

logger = logging.getLogger(__name__)


class GrammarCheckError(RuntimeError):
    """The grammar API could not be reached or returned an unusable response."""


def format_suggestion(match: GrammarMatch) -> str:
    return f"Error: {match.message} | Context: {match.context.text}"


def check_grammar(
    content: str,
    *,
    api_url: str | None = None,
    language: str | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[str]:
    """POST ``content`` to the grammar API and return one suggestion string per match.

    Single attempt, no retry. Raises GrammarCheckError on transport failure, a
    non-JSON content type, a non-200 status or a body that does not parse.
    """
    url = api_url or config.GRAMMAR_CHECK_API_URL
    form = {"text": content, "language": language or config.GRAMMAR_CHECK_LANGUAGE}
    try:
        with httpx.Client(timeout=timeout or config.GRAMMAR_CHECK_TIMEOUT, transport=transport) as client:
            resp = client.post(url, data=form)
    except httpx.HTTPError as e:
        raise GrammarCheckError(f"failed to send request: {e}") from e

    content_type = resp.headers.get("Content-Type", "")
    if "application/json" not in content_type:
        logger.error("Invalid response from grammar API (content-type=%r): %s", content_type, resp.text)
        raise GrammarCheckError("invalid response format")

    if resp.status_code != 200:
        logger.error("Error from grammar API: status=%d body=%s", resp.status_code, resp.text)
        raise GrammarCheckError("failed to get valid response from grammar API")

    try:
        result = GrammarCheckResult.model_validate_json(resp.content)
    except ValidationError as e:
        logger.error("Failed to parse grammar API response: %s body=%s", e, resp.text)
        raise GrammarCheckError(f"failed to parse API response: {e}") from e

    return [format_suggestion(m) for m in result.matches]
