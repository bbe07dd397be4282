"""Tests for the content, history and revert routes."""

from unittest.mock import patch

import pytest

from sitecontent.domain.exceptions import StoreError

_MAX_ENTRIES = 10


class TestGetContent:
    """Test GET /api/content."""

    def test_serves_defaults_on_empty_store(self, client) -> None:
        """Verify a fresh store serves the default site content."""
        response = client.get("/api/content")

        assert response.status_code == 200
        body = response.get_json()
        assert body["pageContent"]["companyName"] == "Andries Service+"
        assert body["galleryImages"] == []
        assert response.headers["Cache-Control"] == "s-maxage=60, stale-while-revalidate=300"

    def test_serves_live_content(self, client, store) -> None:
        """Verify saved content is returned unchanged."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [{"_id": "g1"}])

        response = client.get("/api/content")

        assert response.get_json() == {
            "pageContent": {"title": "A"},
            "galleryImages": [{"_id": "g1"}],
        }

    def test_wrong_method_is_405(self, client) -> None:
        """Verify unsupported methods are rejected as JSON."""
        response = client.delete("/api/content")

        assert response.status_code == 405
        assert response.get_json() == {"error": "Method Not Allowed"}
        assert "GET" in response.headers["Allow"]

    def test_store_failure_is_500_without_details(self, client) -> None:
        """Verify store errors are reported generically."""
        with patch(
            "sitecontent.store.kv.KeyValueStore.get_many",
            side_effect=StoreError("connection refused on 10.0.0.3"),
        ):
            response = client.get("/api/content")

        assert response.status_code == 500
        assert response.get_json() == {"error": "An internal server error occurred."}


class TestUpdateContent:
    """Test POST /api/update-content."""

    def test_first_update_creates_no_history(self, auth_client, store) -> None:
        """Verify the first write only sets live content."""
        response = auth_client.post(
            "/api/update-content",
            json={"pageContent": {"title": "A"}, "galleryImages": []},
        )

        assert response.status_code == 200
        assert response.get_json()["success"] is True
        assert store.get("pageContent") == {"title": "A"}
        assert store.list_range("content_history") == []

    def test_update_snapshots_previous_state(self, auth_client, store) -> None:
        """Verify the previous content is kept as the newest history entry."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])

        auth_client.post(
            "/api/update-content",
            json={"pageContent": {"title": "B"}, "galleryImages": [{"_id": "g1"}]},
        )

        history = auth_client.get("/api/content-history").get_json()["history"]
        assert len(history) == 1
        assert store.get(f"history:{history[0]}") == {
            "pageContent": {"title": "A"},
            "galleryImages": [],
        }
        assert store.get("pageContent") == {"title": "B"}
        assert store.get("galleryImages") == [{"_id": "g1"}]

    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"galleryImages": []}, "Missing pageContent"),
            ({"pageContent": {}, "galleryImages": []}, "Missing pageContent"),
            ({"pageContent": {"title": "A"}}, "Missing galleryImages"),
            ({"pageContent": {"title": "A"}, "galleryImages": None}, "Missing galleryImages"),
            ({"pageContent": {"title": "A"}, "galleryImages": "x"}, "must be a list"),
        ],
    )
    def test_invalid_payload_is_400(self, auth_client, store, payload, message) -> None:
        """Verify malformed payloads never reach the store."""
        response = auth_client.post("/api/update-content", json=payload)

        assert response.status_code == 400
        assert message in response.get_json()["error"]
        assert store.get("pageContent") is None

    def test_new_service_without_icon_is_saved(self, auth_client, store) -> None:
        """Verify a freshly added service with an empty icon url can be saved."""
        page_content = {
            "title": "A",
            "servicesList": [
                {"_key": "s1", "title": "Nieuw", "customIcon": {"url": "", "alt": ""}},
            ],
        }

        response = auth_client.post(
            "/api/update-content",
            json={"pageContent": page_content, "galleryImages": []},
        )

        assert response.status_code == 200
        assert store.get("pageContent") == page_content

    def test_new_gallery_item_without_image_is_saved(self, auth_client, store) -> None:
        """Verify a freshly added gallery tile with an empty image url can be saved."""
        gallery = [{"_id": "g1", "image": {"url": "", "alt": ""}, "published": False}]

        response = auth_client.post(
            "/api/update-content",
            json={"pageContent": {"title": "A"}, "galleryImages": gallery},
        )

        assert response.status_code == 200
        assert store.get("galleryImages") == gallery

    def test_non_object_body_is_400(self, auth_client) -> None:
        """Verify a non-JSON body is rejected."""
        response = auth_client.post(
            "/api/update-content", data="nope", content_type="text/plain"
        )

        assert response.status_code == 400

    def test_many_updates_keep_ten_entries(self, auth_client) -> None:
        """Verify the history endpoint never lists more than ten entries."""
        for i in range(12):
            auth_client.post(
                "/api/update-content",
                json={"pageContent": {"title": str(i)}, "galleryImages": []},
            )

        history = auth_client.get("/api/content-history").get_json()["history"]
        assert len(history) == _MAX_ENTRIES
        assert history == sorted(history, reverse=True)

    def test_snapshot_failure_still_saves(self, auth_client, store) -> None:
        """Verify a failing snapshot does not fail the update."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])

        with patch(
            "sitecontent.services.history.HistoryManager.record_snapshot",
            side_effect=StoreError("timeout"),
        ):
            response = auth_client.post(
                "/api/update-content",
                json={"pageContent": {"title": "B"}, "galleryImages": []},
            )

        assert response.status_code == 200
        assert store.get("pageContent") == {"title": "B"}


class TestRevertContent:
    """Test POST /api/revert-content."""

    def test_scenario_revert_to_first_entry(self, auth_client, store) -> None:
        """Verify the A -> B -> C -> revert walkthrough over HTTP."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])

        for title in ("B", "C"):
            auth_client.post(
                "/api/update-content",
                json={"pageContent": {"title": title}, "galleryImages": []},
            )

        history = auth_client.get("/api/content-history").get_json()["history"]
        assert len(history) == 2
        first = history[-1]

        response = auth_client.post("/api/revert-content", json={"timestamp": first})

        assert response.status_code == 200
        assert first in response.get_json()["message"]
        assert auth_client.get("/api/content").get_json() == {
            "pageContent": {"title": "A"},
            "galleryImages": [],
        }
        assert auth_client.get("/api/content-history").get_json()["history"] == history

    def test_unknown_timestamp_is_404(self, auth_client, store) -> None:
        """Verify reverting to a missing snapshot changes nothing."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])

        response = auth_client.post(
            "/api/revert-content", json={"timestamp": "2001-01-01T00:00:00.000Z"}
        )

        assert response.status_code == 404
        assert response.get_json() == {"error": "Historical version not found."}
        assert store.get("pageContent") == {"title": "A"}

    def test_non_iso_timestamp_is_404(self, auth_client, store) -> None:
        """Verify a timestamp that names no snapshot is not found, whatever its format."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])

        response = auth_client.post("/api/revert-content", json={"timestamp": "abc"})

        assert response.status_code == 404
        assert response.get_json() == {"error": "Historical version not found."}
        assert store.get("pageContent") == {"title": "A"}

    @pytest.mark.parametrize("payload", [{}, {"timestamp": ""}, {"timestamp": 12345}])
    def test_bad_timestamp_is_400(self, auth_client, payload) -> None:
        """Verify missing or non-string timestamps are rejected."""
        response = auth_client.post("/api/revert-content", json=payload)

        assert response.status_code == 400
        assert "error" in response.get_json()


class TestAuthGate:
    """Test that mutating and admin endpoints require a session."""

    @pytest.mark.parametrize(
        "method,path,payload",
        [
            ("post", "/api/update-content", {"pageContent": {"title": "X"}, "galleryImages": []}),
            ("post", "/api/revert-content", {"timestamp": "2024-05-01T09:00:00.000000Z"}),
            ("get", "/api/content-history", None),
        ],
    )
    def test_missing_cookie_is_401_without_mutation(
        self, client, store, redis_client, method, path, payload
    ) -> None:
        """Verify unauthenticated calls are rejected before touching the store."""
        store.set("pageContent", {"title": "A"})
        store.set("galleryImages", [])
        store.set(
            "history:2024-05-01T09:00:00.000000Z",
            {"pageContent": {"title": "old"}, "galleryImages": []},
        )
        before = {key: redis_client.get(key) for key in redis_client.keys("*")}

        response = getattr(client, method)(path, json=payload)

        assert response.status_code == 401
        assert response.get_json() == {"error": "Authentication required."}
        after = {key: redis_client.get(key) for key in redis_client.keys("*")}
        assert after == before

    def test_invalid_token_is_401(self, client, store) -> None:
        """Verify a forged cookie is rejected."""
        client.set_cookie("auth_token", "not-a-jwt")

        response = client.post(
            "/api/update-content",
            json={"pageContent": {"title": "X"}, "galleryImages": []},
        )

        assert response.status_code == 401
        assert response.get_json() == {"error": "Invalid or expired token."}
        assert store.get("pageContent") is None
