import io

from summarizer.extensions import db
from summarizer.models import Transcript


def _file(data, name="meeting.txt", content_type="text/plain"):
    return {"transcript": (io.BytesIO(data), name, content_type)}


def test_upload_text_file(client):
    resp = client.post("/api/upload", data=_file(b"Alice: hello.\nBob: hi."), content_type="multipart/form-data")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["filename"] == "meeting.txt"
    assert body["fileSize"] == len(b"Alice: hello.\nBob: hi.")
    assert body["transcriptId"]
    assert body["uploadedAt"]

    stored = client.get(f"/api/transcript/{body['transcriptId']}").get_json()
    assert stored["content"] == "Alice: hello.\nBob: hi."


def test_paste_json_counts_utf8_bytes_and_names_file(client):
    resp = client.post("/api/upload", json={"content": "héllo wörld"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["fileSize"] == len("héllo wörld".encode("utf-8"))
    assert body["filename"].startswith("pasted-text-")
    assert body["filename"].endswith(".txt")


def test_paste_form_keeps_filename(client):
    resp = client.post("/api/upload", data={"content": "Notes.", "filename": "standup.txt"})
    assert resp.status_code == 200
    assert resp.get_json()["filename"] == "standup.txt"


def test_missing_content_is_rejected(client):
    resp = client.post("/api/upload", json={})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No transcript content provided"


def test_whitespace_only_is_rejected_on_both_paths(client, app):
    resp = client.post("/api/upload", json={"content": "  \n\t "})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Transcript content is empty"

    resp = client.post("/api/upload", data=_file(b"   \n"), content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Transcript content is empty"

    with app.app_context():
        assert Transcript.query.count() == 0


def test_non_text_file_is_rejected(client):
    resp = client.post("/api/upload", data=_file(b"%PDF-1.4", "notes.pdf", "application/pdf"),
                       content_type="multipart/form-data")
    assert resp.status_code == 415
    assert resp.get_json()["error"] == "Only .txt files are allowed"


def test_oversized_upload_is_rejected(client, app):
    app.config["MAX_TRANSCRIPT_BYTES"] = 16
    resp = client.post("/api/upload", data=_file(b"a" * 17), content_type="multipart/form-data")
    assert resp.status_code == 413

    resp = client.post("/api/upload", json={"content": "b" * 17})
    assert resp.status_code == 413

    resp = client.post("/api/upload", data=_file(b"a" * 16), content_type="multipart/form-data")
    assert resp.status_code == 200


def test_body_over_request_limit_returns_json_413(client, app):
    app.config["MAX_CONTENT_LENGTH"] = 64
    resp = client.post("/api/upload", json={"content": "c" * 200})
    assert resp.status_code == 413
    assert "error" in resp.get_json()


def test_list_transcripts_newest_first_without_content(client):
    first = client.post("/api/upload", json={"content": "first", "filename": "a.txt"}).get_json()
    second = client.post("/api/upload", json={"content": "second", "filename": "b.txt"}).get_json()

    listing = client.get("/api/transcripts").get_json()
    assert [t["id"] for t in listing] == [second["transcriptId"], first["transcriptId"]]
    assert "content" not in listing[0]
    assert listing[0]["fileSize"] == len("second")


def test_unknown_transcript_is_404(client):
    resp = client.get("/api/transcript/999")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Transcript not found"}


def test_create_transcript_service(app):
    from summarizer.services.transcripts import create_transcript
    with app.app_context():
        t = create_transcript("Some text", filename="x.txt")
        assert db.session.get(Transcript, t.id).file_size == 9


def test_non_string_paste_fields_are_rejected(client):
    resp = client.post("/api/upload", json={"content": 42})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Transcript content must be text"

    resp = client.post("/api/upload", json={"content": "notes", "filename": 7})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Filename must be text"
