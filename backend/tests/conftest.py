import functools

import httpx
import pytest
from fastapi.testclient import TestClient

CANNED_LANGUAGETOOL_RESPONSE = {
    "software": {"name": "LanguageTool", "apiVersion": 1},
    "matches": [
        {
            "message": "Possible spelling mistake found.",
            "offset": 9,
            "length": 4,
            "context": {"text": "# Title  Helo wrld", "offset": 9, "length": 4},
        },
        {
            "message": "Possible spelling mistake found.",
            "offset": 14,
            "length": 4,
            "context": {"text": "# Title  Helo wrld", "offset": 14, "length": 4},
        },
    ],
}


def json_transport(payload, status_code: int = 200) -> httpx.MockTransport:
    """MockTransport answering every request with ``payload`` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture()
def client() -> TestClient:
    from note_taking.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _isolate_uploads_and_grammar_api(tmp_path, monkeypatch):
    # Temp upload dir, and never hit the real LanguageTool API.
    from note_taking import config
    from note_taking.api import routes
    from note_taking.services.grammar_checker import check_grammar

    monkeypatch.setattr(config, "UPLOAD_DIR", tmp_path / "uploads")
    monkeypatch.setattr(
        routes,
        "check_grammar",
        functools.partial(check_grammar, transport=json_transport(CANNED_LANGUAGETOOL_RESPONSE)),
    )
    yield


@pytest.fixture()
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture()
def grammar_transport(monkeypatch):
    """Swap the grammar API transport used by the upload route."""
    from note_taking.api import routes
    from note_taking.services.grammar_checker import check_grammar

    def _use(transport: httpx.BaseTransport) -> None:
        monkeypatch.setattr(routes, "check_grammar", functools.partial(check_grammar, transport=transport))

    return _use


@pytest.fixture()
def canned_suggestions() -> list[str]:
    return [
        f"Error: {m['message']} | Context: {m['context']['text']}"
        for m in CANNED_LANGUAGETOOL_RESPONSE["matches"]
    ]
