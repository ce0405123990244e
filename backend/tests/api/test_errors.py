"""Tests for the API exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from api.errors import register_error_handlers, status_for
from shared.exceptions import (
    CoiError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)


class Item(BaseModel):
    name: str


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        errors = {
            "validation": ValidationError("bad input", code="BAD_INPUT"),
            "auth": AuthenticationError("who are you"),
            "forbidden": AuthorizationError("not yours"),
            "missing": NotFoundError("gone", details={"id": "x"}),
            "conflict": ConflictError("taken"),
            "base": CoiError("unmapped"),
        }
        raise errors[kind]

    @app.get("/crash")
    async def crash():
        raise RuntimeError("database password is hunter2")

    @app.post("/items")
    async def create_item(item: Item):
        return item

    return app


class TestDomainErrors:
    @pytest.mark.parametrize(
        "kind, status_code",
        [
            ("validation", 400),
            ("auth", 401),
            ("forbidden", 403),
            ("missing", 404),
            ("conflict", 409),
            ("base", 500),
        ],
    )
    def test_status_mapping(self, app, kind, status_code):
        response = TestClient(app).get(f"/raise/{kind}")
        assert response.status_code == status_code

    def test_body_shape(self, app):
        response = TestClient(app).get("/raise/missing")

        assert response.json() == {
            "error": "NotFoundError",
            "message": "gone",
            "details": {"id": "x"},
        }

    def test_status_for_subclass(self):
        class CertificateGone(NotFoundError):
            pass

        assert status_for(CertificateGone("gone")) == 404


class TestRequestValidation:
    def test_invalid_body_is_400(self, app):
        response = TestClient(app).post("/items", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"]["errors"]


class TestUnhandledErrors:
    def test_generic_500(self, app):
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/crash")

        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_ERROR"
        assert "hunter2" not in response.text
