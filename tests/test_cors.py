"""The wildcard CORS policy applies to every route, including errors and sub-apps."""

import pytest

ORIGIN = "https://evil.example"

ROUTES = [
    ("GET", "/", None),
    ("GET", "/hello", None),
    ("GET", "/admin", None),
    ("GET", "/actuator/env", None),
    ("GET", "/crash", None),
    ("GET", "/swagger.json", None),
    ("GET", "/api-docs", None),
    ("GET", "/swagger", None),
    ("GET", "/swagger-ui.html", None),
    ("POST", "/graphql", {"query": "{ hello }"}),
    ("GET", "/files/", None),
    ("GET", "/files/readme.txt", None),
    ("GET", "/files/missing.txt", None),
    ("POST", "/api/update-config", {"user": "eve"}),
    ("GET", "/no-such-route", None),
]


def allows(resp, origin=ORIGIN) -> bool:
    return resp.headers.get("access-control-allow-origin") in ("*", origin)


class TestWildcardOrigin:

    @pytest.mark.parametrize("method,path,body", ROUTES)
    def test_every_route_allows_any_origin(self, client, method, path, body):
        resp = client.request(method, path, json=body, headers={"Origin": ORIGIN})
        assert allows(resp), f"{method} {path} -> {resp.status_code} {dict(resp.headers)}"

    def test_crash_response_keeps_cors_header(self, client):
        resp = client.get("/crash", headers={"Origin": ORIGIN})
        assert resp.status_code == 500
        assert allows(resp)

    def test_generic_500_keeps_cors_header(self, make_client):
        client = make_client(verbose_errors=False)
        resp = client.get("/crash", headers={"Origin": ORIGIN})
        assert resp.status_code == 500
        assert resp.text == "Internal Server Error"
        assert allows(resp)

    @pytest.mark.parametrize("origin", ["http://localhost:8080", "null", "https://a.b.c"])
    def test_arbitrary_origins(self, client, origin):
        resp = client.get("/actuator/env", headers={"Origin": origin})
        assert allows(resp, origin)

    def test_preflight_allows_any_method_and_header(self, client):
        resp = client.options(
            "/api/update-config",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "X-Custom-Header",
            },
        )
        assert resp.status_code == 200
        assert allows(resp)
        assert "POST" in resp.headers["access-control-allow-methods"]
        assert "x-custom-header" in resp.headers["access-control-allow-headers"].lower()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
