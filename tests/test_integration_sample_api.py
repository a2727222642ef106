"""Integration tests: login resolution through the sample API."""

from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

SID = "S-1-5-21-3623811015-3361044348-30300820-1013"
USER_ID = "3f2b8c1e-6a4d-4e9b-9c71-0d5e2a7f1b36"

GOOGLE_PAYLOAD: dict[str, Any] = {
    "iss": "https://accounts.google.com",
    "aud": "client-1",
    "sub": USER_ID,
    "name": "Alice Example",
    "email": "alice@example.com",
    "email_verified": True,
    "given_name": "Alice",
    "family_name": "Example",
}


def _headers(payload: dict[str, Any]) -> dict[str, str]:
    return {"X-Test-Claims": json.dumps(payload)}


@pytest.mark.integration
class TestCurrentLogin:
    def test_anonymous_is_null(self, client: TestClient) -> None:
        resp = client.get("/api/test")
        assert resp.status_code == 200
        assert resp.json() is None

    def test_google_login(self, client: TestClient) -> None:
        resp = client.get("/api/test", headers=_headers(GOOGLE_PAYLOAD))
        assert resp.status_code == 200
        assert resp.json() == {
            "provider": "Google",
            "subject": USER_ID,
            "name": "Alice Example",
            "givenName": "Alice",
            "surname": "Example",
            "email": "alice@example.com",
            "emailVerified": True,
            "picture": None,
        }

    def test_active_directory_login(self, client: TestClient) -> None:
        payload = {
            "iss": "AD AUTHORITY",
            "http://schemas.microsoft.com/ws/2008/06/identity/claims/primarysid": SID,
            "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name": "CORP\\alice",
        }
        body = client.get("/api/test", headers=_headers(payload)).json()
        assert body["provider"] == "ActiveDirectory"
        assert body["subject"] == SID
        assert body["name"] == "alice"
        assert body["email"] is None

    def test_missing_claim_is_401(self, client: TestClient) -> None:
        payload = {k: v for k, v in GOOGLE_PAYLOAD.items() if k != "email"}
        resp = client.get("/api/test", headers=_headers(payload))
        assert resp.status_code == 401
        body = resp.json()
        assert body["error_code"] == "MISSING_CLAIM"
        assert body["context"]["field"] == "email"
        assert "application/problem+json" in resp.headers["content-type"]

    def test_unregistered_issuer_is_500(self, client: TestClient) -> None:
        payload = {**GOOGLE_PAYLOAD, "iss": "https://login.example.com"}
        resp = client.get("/api/test", headers=_headers(payload))
        assert resp.status_code == 500
        assert resp.json()["error_code"] == "UNREGISTERED_ISSUER"

    def test_requests_do_not_share_claims(self, client: TestClient) -> None:
        client.get("/api/test", headers=_headers(GOOGLE_PAYLOAD))
        assert client.get("/api/test").json() is None


@pytest.mark.integration
class TestRequiredLogin:
    def test_anonymous_is_401(self, client: TestClient) -> None:
        resp = client.get("/api/test/required")
        assert resp.status_code == 401
        assert resp.json()["error_code"] == "NO_LOGIN"
        assert "WWW-Authenticate" in resp.headers

    def test_authenticated(self, client: TestClient) -> None:
        resp = client.get("/api/test/required", headers=_headers(GOOGLE_PAYLOAD))
        assert resp.status_code == 200
        assert resp.json()["subject"] == USER_ID


@pytest.mark.integration
class TestLegacyUser:
    def test_anonymous(self, client: TestClient) -> None:
        assert client.get("/api/test/user").json() == {
            "provider": "httpcontext",
            "user": "Anonymous",
        }

    def test_domain_name_normalized(self, client: TestClient) -> None:
        payload = {"http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name": "CORP\\bob"}
        assert client.get("/api/test/user", headers=_headers(payload)).json()["user"] == "bob"

    def test_unregistered_issuer_still_named(self, client: TestClient) -> None:
        payload = {"iss": "https://login.example.com", "name": "carol"}
        assert client.get("/api/test/user", headers=_headers(payload)).json()["user"] == "carol"


@pytest.mark.integration
class TestLifespan:
    def test_resolver_on_app_state(self, client: TestClient) -> None:
        resolver = client.app.state.login_resolver  # type: ignore[attr-defined]
        assert set(resolver.registry.issuers) == {
            "https://accounts.google.com",
            "AD AUTHORITY",
            "LOCAL AUTHORITY",
        }
