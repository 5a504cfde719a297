def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Lawyer Point server is running"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_settings_read_origins(settings):
    settings.allowed_origins = "http://localhost:3000, https://lawyerpoint.web.app"
    assert settings.allowed_origins_list == ["http://localhost:3000", "https://lawyerpoint.web.app"]
