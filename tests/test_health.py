# tests/test_health.py
from fastapi import status


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"status": "ok"}


def test_root_describes_api(client) -> None:
    r = client.get("/")
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["name"] == "AgentXRP API"


def test_unknown_route_is_not_found(client) -> None:
    assert client.get("/api/nowhere").status_code == status.HTTP_404_NOT_FOUND
