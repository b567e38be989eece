"""
Tests for the question API endpoints.

Exercises the FastAPI routes end to end against an in-memory store:
listing, windowing, insertion, error classification, CORS and
security headers.
"""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from question_service.core.config import Settings
from question_service.domain.questions.ports import QuestionRepository
from question_service.infrastructure.questions.in_memory_store import (
    InMemoryQuestionStore,
)
from question_service.main import create_app
from question_service.shared.security.headers import SECURE_HEADERS


def _payload(qid: str, **overrides) -> dict:
    body = {"id": qid, "title": f"Title {qid}", "content": f"Content {qid}", "tags": ["new"]}
    body.update(overrides)
    return body


class TestListQuestions:
    """Tests for GET /questions."""

    def test_lists_every_question(self, client: TestClient) -> None:
        response = client.get("/questions")
        assert response.status_code == 200
        body = response.json()
        assert [q["id"] for q in body] == ["1", "2", "3"]
        assert body[0] == {
            "id": "1",
            "title": "Question 1",
            "content": "Content of question 1",
            "tags": ["faq"],
        }
        assert body[1]["tags"] is None

    def test_window_inside_listing(self, client: TestClient) -> None:
        response = client.get("/questions", params={"start": 0, "end": 2})
        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == ["1", "2"]

    def test_window_past_end_is_clamped(self, client: TestClient) -> None:
        response = client.get("/questions?start=1&end=10")
        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == ["2", "3"]

    def test_start_beyond_listing_is_empty(self, client: TestClient) -> None:
        response = client.get("/questions?start=5&end=10")
        assert response.status_code == 200
        assert response.json() == []

    def test_empty_window(self, client: TestClient) -> None:
        response = client.get("/questions?start=2&end=2")
        assert response.status_code == 200
        assert response.json() == []

    def test_unrelated_parameters_list_everything(self, client: TestClient) -> None:
        response = client.get("/questions?sort=title")
        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_end_below_start(self, client: TestClient) -> None:
        response = client.get("/questions?start=3&end=1")
        assert response.status_code == 416
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == (
            "Order of arguments is invalid. 'Start' cannot be greater than 'end'"
        )

    def test_only_start(self, client: TestClient) -> None:
        response = client.get("/questions?start=1")
        assert response.status_code == 416
        assert response.text == "Missing parameter: end"

    def test_only_end(self, client: TestClient) -> None:
        response = client.get("/questions?end=1")
        assert response.status_code == 416
        assert response.text == "Missing parameter: start"

    def test_non_numeric_start(self, client: TestClient) -> None:
        response = client.get("/questions?start=abc&end=2")
        assert response.status_code == 416
        assert response.text == (
            "Cannot parse parameter 'start': invalid digit found in string"
        )

    def test_negative_bound(self, client: TestClient) -> None:
        response = client.get("/questions?start=-1&end=2")
        assert response.status_code == 416
        assert response.text.startswith("Cannot parse parameter 'start'")

    def test_oversized_bound(self, client: TestClient) -> None:
        response = client.get("/questions", params={"start": "0", "end": "9" * 5000})
        assert response.status_code == 416
        assert response.text == (
            "Cannot parse parameter 'end': number too large to fit in target type"
        )


class TestAddQuestion:
    """Tests for POST /questions."""

    def test_insert_then_list(self, client: TestClient) -> None:
        response = client.post("/questions", json=_payload("4"))
        assert response.status_code == 200
        assert response.text == "Question added"

        listing = client.get("/questions").json()
        matching = [q for q in listing if q["id"] == "4"]
        assert matching == [_payload("4")]

    def test_insert_without_tags(self, client: TestClient) -> None:
        body = _payload("5")
        del body["tags"]
        assert client.post("/questions", json=body).status_code == 200
        listing = client.get("/questions").json()
        assert [q["tags"] for q in listing if q["id"] == "5"] == [None]

    def test_reinsert_overwrites(self, client: TestClient) -> None:
        client.post("/questions", json=_payload("2", title="Changed"))
        listing = client.get("/questions").json()
        assert len(listing) == 3
        assert [q["title"] for q in listing if q["id"] == "2"] == ["Changed"]

    def test_empty_id_rejected(self, client: TestClient) -> None:
        response = client.post("/questions", json=_payload(""))
        assert response.status_code == 416
        assert response.text == "Invalid question: id must not be empty"
        assert len(client.get("/questions").json()) == 3

    def test_missing_field_rejected(self, client: TestClient) -> None:
        body = _payload("6")
        del body["title"]
        response = client.post("/questions", json=body)
        assert response.status_code == 416
        assert response.text == "Invalid question: title: Field required"

    def test_wrong_type_rejected(self, client: TestClient) -> None:
        response = client.post("/questions", json=_payload("7", tags="not-a-list"))
        assert response.status_code == 416
        assert response.text.startswith("Invalid question: tags")

    def test_malformed_json_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/questions",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 416
        assert response.text.startswith("Invalid question:")


class TestRouting:
    """Unmatched methods and paths resolve to 404."""

    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
    def test_unhandled_methods(self, client: TestClient, method: str) -> None:
        response = client.request(method, "/questions")
        assert response.status_code == 404
        assert response.text == "Route not found"

    def test_unknown_path(self, client: TestClient) -> None:
        response = client.get("/answers")
        assert response.status_code == 404
        assert response.text == "Route not found"


class TestCrossOrigin:
    """Tests for the cross-origin policy."""

    def test_simple_request_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/questions", headers={"Origin": "https://example.org"})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
    def test_preflight_declared_methods(self, client: TestClient, method: str) -> None:
        response = client.options(
            "/questions",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": method,
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert response.status_code == 200
        assert method in response.headers["access-control-allow-methods"]

    def test_preflight_undeclared_method_forbidden(self, client: TestClient) -> None:
        response = client.options(
            "/questions",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "PATCH",
            },
        )
        assert response.status_code == 403
        assert response.text == "CORS request forbidden: Disallowed CORS method"

    def test_preflight_undeclared_header_forbidden(self, client: TestClient) -> None:
        response = client.options(
            "/questions",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "x-api-key",
            },
        )
        assert response.status_code == 403
        assert response.text.startswith("CORS request forbidden:")


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get("/questions")
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.get("/questions?start=1")
        assert response.status_code == 416
        assert response.headers["Cache-Control"] == "no-store"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_page_only_headers_absent(self, client: TestClient) -> None:
        response = client.get("/questions")
        assert "X-Frame-Options" not in response.headers
        assert "Content-Security-Policy" not in response.headers


class TestHealth:
    """Tests for GET /health."""

    def test_health_reports_store_size(self, client: TestClient) -> None:
        client.post("/questions", json=_payload("9"))
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0", "question_count": 4}


class TestUnexpectedErrors:
    """Unexpected failures answer 500 without internals."""

    def test_store_failure_is_internal_error(self, test_settings: Settings) -> None:
        store = AsyncMock(spec=QuestionRepository)
        store.get_all.side_effect = RuntimeError("database exploded")
        app = create_app(settings=test_settings, store=store)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/questions")

        assert response.status_code == 500
        assert response.text == "Internal server error"
        assert "exploded" not in response.text


class TestConcurrentRequests:
    """Concurrent requests against one application share one store."""

    @pytest.mark.asyncio
    async def test_concurrent_inserts_are_all_visible(self, test_settings: Settings) -> None:
        app = create_app(settings=test_settings, store=InMemoryQuestionStore())
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            responses = await asyncio.gather(
                *(ac.post("/questions", json=_payload(f"c{i}")) for i in range(50))
            )
            assert all(r.status_code == 200 for r in responses)

            listing = (await ac.get("/questions")).json()

        assert len(listing) == 50
        assert {q["id"] for q in listing} == {f"c{i}" for i in range(50)}


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    @staticmethod
    def _limited_app(store: InMemoryQuestionStore, enabled: bool = True):
        settings = Settings(rate_limit_enabled=enabled, rate_limit_default="2/minute")
        return create_app(settings=settings, store=store)

    def test_rate_limit_returns_429(self, store: InMemoryQuestionStore) -> None:
        with TestClient(self._limited_app(store)) as limited_client:
            assert limited_client.get("/questions").status_code == 200
            assert limited_client.get("/questions").status_code == 200

            response = limited_client.get("/questions")

        assert response.status_code == 429
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("Rate limit exceeded")
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_apps_keep_separate_counters(self, store: InMemoryQuestionStore) -> None:
        first = self._limited_app(store)
        second = self._limited_app(store)

        with TestClient(first) as first_client, TestClient(second) as second_client:
            for _ in range(2):
                assert first_client.get("/questions").status_code == 200
            assert first_client.get("/questions").status_code == 429

            assert second_client.get("/questions").status_code == 200
            assert second_client.get("/questions").status_code == 200

    def test_disabled_app_unaffected_by_limited_app(
        self, store: InMemoryQuestionStore
    ) -> None:
        limited = self._limited_app(store)
        unlimited = self._limited_app(store, enabled=False)

        with TestClient(limited) as limited_client, TestClient(unlimited) as free_client:
            for _ in range(3):
                limited_client.get("/questions")
            assert limited_client.get("/questions").status_code == 429

            statuses = {free_client.get("/questions").status_code for _ in range(5)}

        assert statuses == {200}
