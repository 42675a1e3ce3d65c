"""Tests for the fixed-response routes: /hello, /admin, /actuator/env, /crash, /."""

import pytest


class TestHello:

    def test_returns_literal_message(self, client):
        resp = client.get("/hello")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Hello World"}

    def test_unaffected_by_state_changes(self, client):
        client.post("/api/update-config", json={"user": "alice"})
        assert client.get("/hello").json() == {"message": "Hello World"}


class TestAdmin:

    def test_no_auth_needed(self, client):
        resp = client.get("/admin")
        assert resp.status_code == 200
        assert resp.text == "⚠️ Welcome to Admin Panel — No Auth Needed"
        assert resp.headers["content-type"].startswith("text/plain")


class TestActuator:

    def test_leaks_fixed_credentials(self, client):
        resp = client.get("/actuator/env")
        assert resp.status_code == 200
        assert resp.json() == {
            "DB_USER": "admin",
            "DB_PASSWORD": "supersecret",
            "APP_ENV": "development",
        }

    def test_reports_runtime_mode(self, make_client):
        client = make_client(app_env="staging")
        assert client.get("/actuator/env").json()["APP_ENV"] == "staging"

    def test_idempotent_across_requests(self, client):
        first = client.get("/actuator/env").json()
        client.post("/api/update-config", json={"user": "mallory"})
        client.get("/crash")
        assert client.get("/actuator/env").json() == first


class TestCrash:

    def test_plain_text_traceback(self, client):
        resp = client.get("/crash")
        assert resp.status_code == 500
        assert "Traceback" in resp.text
        assert "Simulated crash: stack trace leak" in resp.text

    def test_html_traceback_for_browsers(self, client):
        resp = client.get("/crash", headers={"Accept": "text/html"})
        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("text/html")
        assert "Simulated crash: stack trace leak" in resp.text

    def test_every_call_fails(self, client):
        for _ in range(3):
            assert client.get("/crash").status_code == 500

    def test_generic_error_without_verbose_errors(self, make_client):
        client = make_client(verbose_errors=False)
        resp = client.get("/crash")
        assert resp.status_code == 500
        assert "Simulated crash" not in resp.text


class TestHomePage:

    def test_placeholders_before_any_update(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "<strong>Last Modified By:</strong> —" in resp.text
        assert "<strong>Last Modified At:</strong> —" in resp.text

    @pytest.mark.parametrize(
        "path", ["/api-docs", "/graphql", "/actuator/env", "/admin", "/crash", "/files/"]
    )
    def test_links_every_exposed_route(self, client, path):
        assert f'href="{path}"' in client.get("/").text

    def test_shows_latest_update(self, client):
        client.post("/api/update-config", json={"user": "alice"})
        text = client.get("/").text
        assert "<strong>Last Modified By:</strong> alice" in text
        assert "<strong>Last Modified At:</strong> —" not in text

    def test_escapes_user_supplied_name(self, client):
        client.post("/api/update-config", json={"user": "<script>x</script>"})
        text = client.get("/").text
        assert "<script>x</script>" not in text
        assert "&lt;script&gt;" in text

    def test_marks_docs_hidden_in_production(self, make_client):
        client = make_client(app_env="production", hide_docs_in_production=True)
        text = client.get("/").text
        assert 'href="/api-docs"' not in text
        assert "hidden in production" in text


class TestUnknownRoute:

    def test_not_found(self, client):
        assert client.get("/does-not-exist").status_code == 404


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
