"""
Tests for the upload client, with the note service stubbed by httpx.MockTransport.
"""
import asyncio

import httpx
import pytest

from soapview.client import GENERIC_FAILURE_MESSAGE, MISSING_FILE_MESSAGE, NoteUploadClient, NoteUploadError

PAYLOAD = {
    "transcription": "Patient says she feels tired.",
    "soap_note": "S: fatigue\nO: BP 120/80\nA: likely viral\nP: rest",
    "timestamp": "2025-03-14T09:26:53Z",
}


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "visit.wav"
    path.write_bytes(b"RIFF0000WAVEfmt ")
    return str(path)


def make_client(handler, endpoint="http://notes.test") -> NoteUploadClient:
    return NoteUploadClient(endpoint=endpoint, timeout=5.0, transport=httpx.MockTransport(handler))


def test_upload_returns_clinical_note(audio_file):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json=PAYLOAD)

    note = asyncio.run(make_client(handler).upload_audio(audio_file))

    assert note.transcription == PAYLOAD["transcription"]
    assert note.soap_note == PAYLOAD["soap_note"]
    assert note.timestamp.year == 2025
    assert seen["url"] == "http://notes.test/upload-audio"
    assert b'name="file"; filename="visit.wav"' in seen["body"]


def test_endpoint_with_trailing_slash(audio_file):
    urls = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json=PAYLOAD)

    asyncio.run(make_client(handler, endpoint="http://notes.test/").upload_audio(audio_file))
    assert urls == ["http://notes.test/upload-audio"]


def test_missing_file_is_rejected(tmp_path):
    client = make_client(lambda request: httpx.Response(200, json=PAYLOAD))
    with pytest.raises(NoteUploadError) as exc_info:
        asyncio.run(client.upload_audio(str(tmp_path / "missing.wav")))
    assert exc_info.value.message == MISSING_FILE_MESSAGE


def test_server_error_status(audio_file):
    client = make_client(lambda request: httpx.Response(502, text="bad gateway"))
    with pytest.raises(NoteUploadError) as exc_info:
        asyncio.run(client.upload_audio(audio_file))
    assert exc_info.value.message == "Server error: 502"
    assert exc_info.value.status_code == 502


def test_malformed_json(audio_file):
    client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(NoteUploadError) as exc_info:
        asyncio.run(client.upload_audio(audio_file))
    assert exc_info.value.message == GENERIC_FAILURE_MESSAGE


def test_payload_missing_fields(audio_file):
    client = make_client(lambda request: httpx.Response(200, json={"transcription": "hi"}))
    with pytest.raises(NoteUploadError) as exc_info:
        asyncio.run(client.upload_audio(audio_file))
    assert exc_info.value.message == GENERIC_FAILURE_MESSAGE


def test_transport_error(audio_file):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NoteUploadError) as exc_info:
        asyncio.run(make_client(handler).upload_audio(audio_file))
    assert exc_info.value.message == GENERIC_FAILURE_MESSAGE
