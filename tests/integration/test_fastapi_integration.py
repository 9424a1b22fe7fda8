"""
Integration tests mounting the rule engine in a FastAPI application.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rulegate.integrations.fastapi import register_error_handlers, validated_body


@pytest.fixture
def client(signup_spec) -> TestClient:
    """FastAPI app with one validated route"""
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/signup")
    async def signup(body: dict = validated_body(signup_spec)):
        return {"accepted": body}

    return TestClient(app)


@pytest.mark.integration
class TestFastAPIIntegration:
    """Tests for validated_body and the ValidationFailed handler"""

    def test_valid_body_reaches_handler(self, client):
        """Test a valid body is passed through to the route"""
        response = client.post("/signup", json={"name": "abcd", "age": 0, "price": "1.50"})

        assert response.status_code == 200
        assert response.json() == {"accepted": {"name": "abcd", "age": 0, "price": "1.50"}}

    def test_invalid_body_returns_400(self, client):
        """Test failing fields are returned with status 400"""
        response = client.post("/signup", json={"name": "ab", "price": "9.9"})

        assert response.status_code == 400
        assert response.json() == {
            "message": "The given data was invalid.",
            "errors": {
                "name": "The name field must be at least 3 characters.",
                "age": "The age field is required.",
                "price": "The price field must have 2 decimal places.",
            },
        }

    def test_error_keys_in_declaration_order(self, client):
        """Test the response lists fields in spec order"""
        response = client.post("/signup", json={"price": "x", "name": ""})

        assert list(response.json()["errors"]) == ["name", "age", "price"]

    def test_malformed_json_returns_400(self, client):
        """Test a body that is not JSON is rejected before validation"""
        response = client.post(
            "/signup",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "Invalid JSON" in response.json()["detail"]
