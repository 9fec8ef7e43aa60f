"""Helpers shared by end-to-end tests."""

from fastapi.testclient import TestClient

TOKEN_HEADER = "x-auth-token"


def register(
    client: TestClient,
    name: str,
    email: str | None = None,
    password: str = "secret123",
) -> str:
    """Register a user and return their session token."""
    response = client.post(
        "/api/users",
        json={
            "name": name,
            "email": email or f"{name.lower()}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["token"]


def auth(token: str) -> dict[str, str]:
    """Headers carrying a session token."""
    return {TOKEN_HEADER: token}


def current_user(client: TestClient, token: str) -> dict:
    """Fetch the user a token belongs to."""
    response = client.get("/api/auth", headers=auth(token))
    assert response.status_code == 200, response.text
    return response.json()
