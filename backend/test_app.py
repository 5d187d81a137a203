from payflow import __version__, config


def test_env_reports_key_presence(client):
    assert client.get("/api/env").json() == {"hasKey": True}


def test_env_reports_missing_key(client, monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")

    assert client.get("/api/env").json() == {"hasKey": False}


def test_env_never_returns_the_key(client):
    assert "sk-test" not in client.get("/api/env").text


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "version": __version__}


def test_index_serves_the_ui(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "/static/app.js" in response.text


def test_static_script_is_served(client):
    response = client.get("/static/app.js")

    assert response.status_code == 200
    assert "sequenceDiagram" in response.text
