from settings import settings


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_docs_are_hidden_outside_debug_mode(api, client):
    assert settings.DEBUG is False
    assert api.debug is False
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404
