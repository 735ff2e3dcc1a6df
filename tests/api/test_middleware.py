"""
Tests for API middleware - error envelopes, request ID, timing.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from calc_spine.api.middleware.errors import error_response
from calc_spine.api.middleware.request_context import PROCESS_TIME_HEADER, REQUEST_ID_HEADER

URL = "/api/v1/calculate"


class TestErrorResponse:
    def test_body_structure(self):
        resp = error_response(422, "Expression is not valid")
        assert resp.status_code == 422
        assert json.loads(resp.body) == {"error": "Expression is not valid"}


class TestRequestContext:
    def test_generates_request_id(self, client):
        resp = client.post(URL, json={"expression": "1+1"})
        assert len(resp.headers[REQUEST_ID_HEADER]) == 36

    def test_echoes_request_id(self, client):
        resp = client.post(URL, json={"expression": "1+1"}, headers={REQUEST_ID_HEADER: "req-42"})
        assert resp.headers[REQUEST_ID_HEADER] == "req-42"

    def test_process_time(self, client):
        resp = client.get("/health/live")
        assert float(resp.headers[PROCESS_TIME_HEADER]) >= 0

    @pytest.mark.parametrize(
        "method, body, status",
        [
            ("POST", {"expression": ""}, 422),
            ("POST", {"expression": "1/0"}, 500),
            ("GET", None, 405),
        ],
    )
    def test_headers_on_errors(self, client, method, body, status):
        resp = client.request(method, URL, json=body)
        assert resp.status_code == status
        assert REQUEST_ID_HEADER in resp.headers
        assert PROCESS_TIME_HEADER in resp.headers


class TestUnhandledException:
    def test_returns_generic_500(self, app):
        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        with TestClient(app) as c:
            resp = c.get("/boom", headers={REQUEST_ID_HEADER: "r1"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
        assert "kaboom" not in resp.text
        assert resp.headers[REQUEST_ID_HEADER] == "r1"
        assert PROCESS_TIME_HEADER in resp.headers
