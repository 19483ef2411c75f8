"""Route gate in front of the admin pages."""

import pytest

from portfolio.middleware import auth_middleware
from portfolio.middleware.auth_middleware import is_protected_path
from portfolio.services.token_service import issue_token


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/admin", True),
        ("/admin/", True),
        ("/admin/projects", True),
        ("/admin/projects/new", True),
        ("/admin/login", False),
        ("/admin/login/", False),
        ("/administrator", False),
        ("/api/hero", False),
        ("/", False),
    ],
)
def test_is_protected_path(path, expected):
    assert is_protected_path(path) is expected


def test_unauthenticated_admin_page_redirects_to_login(client):
    resp = client.get("/admin/anything", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/admin/login"


def test_login_page_is_not_gated(client):
    resp = client.get("/admin/login", follow_redirects=False)
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]


def test_invalid_cookie_redirects(client):
    resp = client.get("/admin", headers={"Cookie": "admin-token=forged.token.value"}, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/admin/login"


def test_valid_session_reaches_admin(admin_client):
    resp = admin_client.get("/admin", follow_redirects=False)
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"]["email"] == "admin@example.com"
    assert "hero" in body["sections"]
    assert body["projectCount"] == 0


def test_validation_error_fails_closed(client, monkeypatch):
    def broken(token):
        raise RuntimeError("signing key unavailable")

    monkeypatch.setattr(auth_middleware, "validate_token", broken)
    token = issue_token("admin@example.com")
    resp = client.get("/admin", headers={"Cookie": f"admin-token={token}"}, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/admin/login"


def test_public_routes_skip_the_gate(client):
    assert client.get("/api/hero").status_code == 200
