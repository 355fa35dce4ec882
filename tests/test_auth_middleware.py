"""Tests for HTTP Basic Auth on the estimator endpoints."""

import base64
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app

_USER = "estimator"
_PASSWORD = "s3cret-slab"

_INCOME_BODY = {
    "annual_income": 1500000,
    "investing": {"percentage": 20, "profitable": True, "short_term": True},
}


def _basic(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def open_client() -> Iterator[TestClient]:
    """Full app with no credentials configured."""
    with patch("src.api.app.AUTH_USERNAME", b""), patch("src.api.app.AUTH_PASSWORD", b""):
        with TestClient(create_app()) as client:
            yield client


@pytest.fixture
def locked_client() -> Iterator[TestClient]:
    """Full app with credentials configured."""
    with patch("src.api.app.AUTH_USERNAME", _USER.encode()), patch(
        "src.api.app.AUTH_PASSWORD", _PASSWORD.encode()
    ):
        with TestClient(create_app()) as client:
            yield client


class TestWithoutCredentials:
    def test_calculate_is_open(self, open_client: TestClient) -> None:
        response = open_client.post("/calculate", json=_INCOME_BODY)
        assert response.status_code == 200
        assert response.json()["total_tax"] == 200000.0

    def test_brackets_is_open(self, open_client: TestClient) -> None:
        assert open_client.get("/brackets").status_code == 200


class TestWithCredentials:
    @pytest.mark.parametrize(
        ("method", "path"),
        [("post", "/calculate"), ("get", "/brackets"), ("get", "/health")],
    )
    def test_missing_header_rejected(
        self, locked_client: TestClient, method: str, path: str
    ) -> None:
        response = locked_client.request(method, path, json=_INCOME_BODY if method == "post" else None)
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Basic"

    def test_rejected_calculation_leaks_no_result(self, locked_client: TestClient) -> None:
        response = locked_client.post(
            "/calculate", json=_INCOME_BODY, headers=_basic(_USER, "wrong")
        )
        assert response.status_code == 401
        assert response.text == "Unauthorized"
        assert "total_tax" not in response.text
        assert "200000" not in response.text

    def test_brackets_with_wrong_user(self, locked_client: TestClient) -> None:
        response = locked_client.get("/brackets", headers=_basic("someone", _PASSWORD))
        assert response.status_code == 401
        assert "rate_label" not in response.text

    def test_calculate_with_valid_credentials(self, locked_client: TestClient) -> None:
        response = locked_client.post(
            "/calculate", json=_INCOME_BODY, headers=_basic(_USER, _PASSWORD)
        )
        assert response.status_code == 200
        assert response.json()["net_income"] == 1300000.0

    def test_brackets_with_valid_credentials(self, locked_client: TestClient) -> None:
        response = locked_client.get("/brackets", headers=_basic(_USER, _PASSWORD))
        assert response.status_code == 200
        assert len(response.json()["brackets"]) == 6

    def test_undecodable_header_rejected(self, locked_client: TestClient) -> None:
        response = locked_client.get("/brackets", headers={"Authorization": "Basic %%%"})
        assert response.status_code == 401

    def test_non_basic_scheme_rejected(self, locked_client: TestClient) -> None:
        response = locked_client.get("/brackets", headers={"Authorization": "Bearer abc"})
        assert response.status_code == 401
