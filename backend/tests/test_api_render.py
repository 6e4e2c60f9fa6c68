def test_render_ok(client, upload_dir):
    (upload_dir / "note.md").write_text("# Title\n\nSome *emphasis*.", encoding="utf-8")
    resp = client.get("/render", params={"file": "note.md"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "text/html; charset=utf-8"
    assert "<h1>Title</h1>" in resp.text
    assert "<em>emphasis</em>" in resp.text


def test_render_after_upload(client):
    client.post("/uploadFile", files={"file": ("up.md", b"## Section\n\n- one\n- two", "text/plain")})
    resp = client.get("/render?file=up.md")
    assert resp.status_code == 200
    assert "<h2>Section</h2>" in resp.text
    assert "<li>one</li>" in resp.text


def test_render_missing_file(client, upload_dir):
    resp = client.get("/render", params={"file": "nope.md"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Unable to read the file"}


def test_render_requires_file_param(client):
    resp = client.get("/render")
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "File name is required"}


def test_render_rejects_traversal(client, upload_dir):
    resp = client.get("/render", params={"file": "../secret.md"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid file name"
