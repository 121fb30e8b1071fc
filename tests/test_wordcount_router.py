from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wordcount.config import reset_settings_cache

INTRO = "## Intro (100)\nHello world."


def test_heading_cursor_returns_limit(client: TestClient) -> None:
    response = client.post("/api/wordcount", json={"text": INTRO, "cursor_line": 0})
    assert response.status_code == 200
    assert response.json() == {
        "visible": True,
        "label": "11 / 100 文字",
        "text": "$(pencil) 11 / 100 文字",
        "count": 11,
        "limit": 100,
    }


def test_body_cursor_returns_limit(client: TestClient) -> None:
    response = client.post("/api/wordcount", json={"text": INTRO, "cursor_line": 1})
    payload = response.json()
    assert (payload["count"], payload["limit"]) == (11, 100)


def test_selection_returns_plain_count(client: TestClient) -> None:
    response = client.post(
        "/api/wordcount",
        json={"text": INTRO, "cursor_line": 1, "selected_text": "abc def"},
    )
    payload = response.json()
    assert payload["label"] == "6 文字"
    assert payload["count"] == 6
    assert payload["limit"] is None


def test_plaintext_is_hidden(client: TestClient) -> None:
    response = client.post(
        "/api/wordcount", json={"text": INTRO, "language_id": "plaintext"}
    )
    assert response.status_code == 200
    assert response.json()["visible"] is False
    assert response.json()["label"] is None


def test_document_count_without_limit(client: TestClient) -> None:
    response = client.post("/api/wordcount", json={"text": "Just text, no header."})
    payload = response.json()
    assert payload["label"] == "18 文字"
    assert payload["limit"] is None


@pytest.mark.parametrize("cursor_line", [-1, 2, 10])
def test_invalid_cursor_is_rejected(client: TestClient, cursor_line: int) -> None:
    response = client.post(
        "/api/wordcount", json={"text": INTRO, "cursor_line": cursor_line}
    )
    assert response.status_code == 422


def test_settings_come_from_environment(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("WORDCOUNT_UNIT_LABEL", "chars")
    monkeypatch.setenv("WORDCOUNT_STATUS_ICON", "")
    reset_settings_cache()
    response = client.post("/api/wordcount", json={"text": INTRO})
    payload = response.json()
    assert payload["text"] == "11 / 100 chars"


def test_sections_endpoint(client: TestClient, sample_markdown: str) -> None:
    response = client.post("/api/wordcount/sections", json={"text": sample_markdown})
    assert response.status_code == 200
    sections = response.json()["sections"]
    assert [item["line"] for item in sections] == [0, 1, 3]
    assert sections[2] == {
        "line": 3,
        "heading": "## Experience (10)",
        "limit": 10,
        "count": 17,
        "over_limit": True,
    }


def test_only_editor_line_breaks_split_lines(client: TestClient) -> None:
    response = client.post(
        "/api/wordcount",
        json={"text": "## Intro (100)\nHello\u2028world.", "cursor_line": 1},
    )
    payload = response.json()
    assert (payload["count"], payload["limit"]) == (11, 100)


def test_cors_does_not_allow_credentials(client: TestClient) -> None:
    response = client.post(
        "/api/wordcount",
        json={"text": INTRO},
        headers={"Origin": "https://editor.example"},
    )
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers
