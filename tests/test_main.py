from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_read_main():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the CampusNet API! Visit /docs for API documentation."}


def test_protected_route_requires_token():
    response = client.get("/api/v1/notifications")
    assert response.status_code == 401
