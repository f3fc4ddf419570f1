"""Tests for the shared-secret access gate."""

import pytest

from core.access import API_KEY_HEADER, is_authorized

from tests.conftest import API_KEY, FakeDatabase, FakeNotifier, make_client, make_settings

GATED_REQUESTS = [
    ("post", "/api/interactions", {"user_id": "u1", "message": "hello"}),
    ("get", "/api/onboarding/steps", None),
    ("post", "/api/onboarding/progress", {"user_id": "u1", "step_id": "invite-team"}),
    ("post", "/api/course-delivery", {"email": "a@example.com", "courseTitle": "Gold 101"}),
    ("get", "/api/dashboard/summary", None),
    ("get", "/api/dashboard/verticals", None),
    ("post", "/api/playbook-run", {"playbookId": "welcome"}),
    ("get", "/api/playbook-stats", None),
]


def _call(client, method, path, body, headers=None):
    if method == "post":
        return client.post(path, json=body, headers=headers or {})
    return client.get(path, headers=headers or {})


class TestGateEnforced:
    def setup_method(self):
        self.db = FakeDatabase()
        self.notifier = FakeNotifier(configured=True)
        self.client = make_client(make_settings(api_key=API_KEY), db=self.db, notifier=self.notifier)

    @pytest.mark.parametrize("method,path,body", GATED_REQUESTS)
    def test_missing_header_is_rejected(self, method, path, body):
        resp = _call(self.client, method, path, body)
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized - missing API key"}
        assert self.db.calls == []
        assert self.notifier.sent == []
        assert len(self.client.app.state.ctx.progress_buffer) == 0

    @pytest.mark.parametrize("method,path,body", GATED_REQUESTS)
    def test_wrong_header_is_rejected(self, method, path, body):
        resp = _call(self.client, method, path, body, {API_KEY_HEADER: API_KEY + "x"})
        assert resp.status_code == 401
        assert self.db.calls == []

    @pytest.mark.parametrize("method,path,body", GATED_REQUESTS)
    def test_correct_header_passes(self, method, path, body):
        resp = _call(self.client, method, path, body, {API_KEY_HEADER: API_KEY})
        assert resp.status_code == 200

    @pytest.mark.parametrize(
        "path",
        ["/health", "/api/agent", "/api/test-db", "/api/interactions/u1"],
    )
    def test_open_routes_skip_gate(self, path):
        assert self.client.get(path).status_code == 200


class TestGateInactive:
    @pytest.mark.parametrize("method,path,body", GATED_REQUESTS)
    def test_no_secret_configured(self, method, path, body):
        client = make_client(make_settings(), notifier=FakeNotifier())
        resp = _call(client, method, path, body, {API_KEY_HEADER: "anything"})
        assert resp.status_code == 200

    def test_allow_insecure_override(self):
        client = make_client(make_settings(api_key=API_KEY, allow_insecure=True))
        assert client.get("/api/dashboard/verticals").status_code == 200


class TestIsAuthorized:
    def test_exact_match_only(self):
        assert is_authorized("abc", expected="abc")
        assert not is_authorized("ABC", expected="abc")
        assert not is_authorized(" abc", expected="abc")
        assert not is_authorized(None, expected="abc")


class TestGateBeforeBodyValidation:
    def setup_method(self):
        self.db = FakeDatabase()
        self.client = make_client(make_settings(api_key=API_KEY), db=self.db)

    @pytest.mark.parametrize(
        "path",
        ["/api/interactions", "/api/onboarding/progress", "/api/course-delivery", "/api/playbook-run"],
    )
    def test_malformed_json_without_key_is_rejected(self, path):
        resp = self.client.post(path, content=b"{not json", headers={"content-type": "application/json"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized - missing API key"}
        assert self.db.calls == []

    def test_malformed_json_with_key_keeps_validation_error(self):
        resp = self.client.post(
            "/api/interactions",
            content=b"{not json",
            headers={"content-type": "application/json", API_KEY_HEADER: API_KEY},
        )
        assert resp.status_code == 422
        assert self.db.calls == []

    @pytest.mark.parametrize(
        "path",
        ["/api/interactions", "/api/onboarding/progress", "/api/course-delivery", "/api/playbook-run"],
    )
    def test_missing_body_without_key_is_rejected(self, path):
        assert self.client.post(path).status_code == 401
