"""Shared fixtures for the end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_app


@pytest.fixture
def client():
    """Test client over an app whose container holds in-memory stores."""
    with TestClient(create_test_app()) as test_client:
        yield test_client


def signup(client: TestClient, name: str, password: str = "Secret123") -> dict:
    """Create an account and return the session body plus an auth header."""
    response = client.post(
        "/signup",
        json={
            "fullname": f"{name.title()} Example",
            "email": f"{name}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 200, response.text
    session = response.json()
    session["headers"] = {"Authorization": f"Bearer {session['access_token']}"}
    return session


def publish(client: TestClient, headers: dict, title: str = "Hello world", **fields) -> dict:
    """Publish a blog and return it as ``/get-blog`` shows it in edit mode."""
    body = {
        "title": title,
        "banner": "https://example.com/banner.jpeg",
        "des": "A short description",
        "content": {"blocks": [{"type": "paragraph", "data": {"text": "Hi"}}]},
        "tags": ["Python"],
        **fields,
    }
    response = client.post("/create-blog", json=body, headers=headers)
    assert response.status_code == 200, response.text
    blog_id = response.json()["id"]

    response = client.post(
        "/get-blog",
        json={"blog_id": blog_id, "draft": body.get("draft", False), "mode": "edit"},
    )
    assert response.status_code == 200, response.text
    return response.json()["blog"]
