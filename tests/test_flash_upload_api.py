from config.settings import settings


def test_flash_defaults(client):
    assert client.get("/api/flash").json() == {"enabled": False, "bannerUrl": ""}


def test_flash_put_overwrites(client):
    r = client.put("/api/flash", json={"enabled": True, "bannerUrl": "https://cdn.example/b.png"})
    assert r.status_code == 200
    assert r.json() == {"enabled": True, "bannerUrl": "https://cdn.example/b.png"}
    assert client.get("/api/flash").json() == r.json()

    assert client.put("/api/flash", json={}).json() == {"enabled": False, "bannerUrl": ""}


def test_upload_preserves_extension_and_serves_bytes(client, tmp_dirs):
    content = b"\x89PNG\r\n\x1a\nfake-image"
    r = client.post("/api/upload", files={"file": ("photo.PNG", content, "image/png")})
    assert r.status_code == 201
    body = r.json()
    assert body["url"].endswith(".PNG")
    assert body["relative"].startswith("/uploads/")
    assert body["url"] == f"http://testserver{body['relative']}"

    served = client.get(body["relative"])
    assert served.status_code == 200
    assert served.content == content
    assert (tmp_dirs / "uploads" / body["relative"].rsplit("/", 1)[1]).read_bytes() == content


def test_upload_without_extension_defaults_to_bin(client):
    r = client.post("/api/upload", files={"file": ("README", b"data", "application/octet-stream")})
    assert r.json()["relative"].endswith(".bin")


def test_upload_requires_file(client):
    assert client.post("/api/upload").status_code == 400


def test_unknown_upload_is_not_found(client):
    assert client.get("/uploads/missing.png").status_code == 404


def test_health_and_request_id(client):
    r = client.get("/api/health", headers={"X-Request-Id": "rid-1"})
    assert r.json() == {"ok": True}
    assert r.headers["X-Request-Id"] == "rid-1"
    assert client.get("/api/health").headers["X-Request-Id"]


def test_json_body_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_JSON_BODY_BYTES", 10)
    r = client.post("/api/events", json={"title": "much longer than ten bytes"})
    assert r.status_code == 413


def test_json_body_limit_counts_streamed_bytes(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_JSON_BODY_BYTES", 10)

    def chunks():
        yield b'{"title": '
        yield b'"much longer than ten bytes"}'

    r = client.post("/api/events", content=chunks(), headers={"content-type": "application/json"})
    assert r.status_code == 413
    assert r.json() == {"error": "request entity too large"}
    assert client.get("/api/events").json() == []


def test_json_body_under_limit_passes(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_JSON_BODY_BYTES", 1024)

    def chunks():
        yield b'{"title": '
        yield b'"short"}'

    r = client.post("/api/events", content=chunks(), headers={"content-type": "application/json"})
    assert r.status_code == 201
    assert r.json()["title"] == "short"


def test_flash_accepts_non_string_banner(client):
    r = client.put("/api/flash", json={"enabled": 1, "bannerUrl": 42})
    assert r.status_code == 200
    assert r.json() == {"enabled": True, "bannerUrl": "42"}
