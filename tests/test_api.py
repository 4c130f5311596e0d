from __future__ import annotations

import pytest

from src.gym_attendance.gym_attendance.container import wire_services
from src.gym_attendance.gym_attendance.core.exceptions import ExternalServiceFailure
from src.gym_attendance.gym_attendance.main import create_app
from src.gym_attendance.gym_attendance.recognition.model import IdentifyCandidate
from tests.fakes import FakeRecognizer, InMemoryAttendance, InMemoryMembers, make_face, png_header


class FailingRecognizer(FakeRecognizer):
    def detect(self, image: bytes):
        raise ExternalServiceFailure("Face API 401: Unspecified: Access denied")


@pytest.fixture
def recognizer():
    return FakeRecognizer(faces=[make_face()])


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def client(monkeypatch, member, recognizer, attendance_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire_services(
        members_repo=InMemoryMembers(member),
        attendance_repo=attendance_repo,
        recognizer=recognizer,
        default_room_id=1,
        lock_timeout=1,
    )
    app = create_app(container=container)
    return app.test_client()


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_empty_body_is_400(client):
    resp = client.post("/api/asistencia", data=b"")

    assert resp.status_code == 400
    assert resp.get_json() == {"mensaje": "Por favor envía una imagen."}


def test_bad_room_is_400(client, png_bytes):
    resp = client.post("/api/asistencia?sala_id=abc", data=png_bytes)

    assert resp.status_code == 400


def test_no_face_is_200(client, recognizer, png_bytes):
    recognizer.faces = []

    resp = client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    assert resp.status_code == 200
    assert resp.get_json() == {"mensaje": "No se detectó ninguna cara."}


def test_unrecognized_is_200(client, png_bytes):
    resp = client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["esSocio"] is False
    assert body["emocion"] == "happiness"


def test_member_entry_then_exit(client, recognizer, member, attendance_repo, png_bytes):
    recognizer.candidate = IdentifyCandidate(person_id=member.person_id, confidence=0.9)

    entry = client.post("/api/asistencia?sala_id=2", data=png_bytes, content_type="application/octet-stream")
    exit_ = client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    assert entry.status_code == 200
    assert entry.get_json()["esSocio"] is True
    assert entry.get_json()["nombre"] == member.full_name
    assert entry.get_json()["accion"] == "entrada"
    assert exit_.get_json()["accion"] == "salida"
    assert exit_.get_json()["mensaje"].startswith("Adiós")
    (rec,) = attendance_repo.rows.values()
    assert rec.room_id == 2
    assert not rec.is_open


def test_desync_is_404(client, recognizer, png_bytes):
    recognizer.candidate = IdentifyCandidate(person_id="not-in-sql", confidence=0.9)

    resp = client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    assert resp.status_code == 404
    assert resp.get_json() == {"mensaje": "Error: Socio en FaceAPI no encontrado en SQL."}


def test_vendor_failure_is_500(monkeypatch, member, png_bytes):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire_services(
        members_repo=InMemoryMembers(member),
        attendance_repo=InMemoryAttendance(),
        recognizer=FailingRecognizer(),
    )
    client = create_app(container=container).test_client()

    resp = client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    assert resp.status_code == 500
    assert resp.get_json() == {"mensaje": "Error interno: Face API 401: Unspecified: Access denied"}


def test_member_history(client, recognizer, member, png_bytes):
    recognizer.candidate = IdentifyCandidate(person_id=member.person_id, confidence=0.9)
    client.post("/api/asistencia", data=png_bytes, content_type="application/octet-stream")

    resp = client.get(f"/api/socios/{member.member_id}/asistencias?limit=5")

    rows = resp.get_json()
    assert resp.status_code == 200
    assert len(rows) == 1
    assert rows[0]["dentro"] is True
    assert rows[0]["emocionEntrada"] == "happiness"


def test_member_history_limit_out_of_range(client, member):
    resp = client.get(f"/api/socios/{member.member_id}/asistencias?limit=1000")

    assert resp.status_code == 400


def test_member_history_unknown_member(client):
    resp = client.get("/api/socios/999/asistencias")

    assert resp.status_code == 404


def test_oversized_image_is_400(client, recognizer):
    resp = client.post("/api/asistencia", data=png_header(30_000, 30_000), content_type="application/octet-stream")

    assert resp.status_code == 400
    assert resp.get_json() == {"mensaje": "La imagen enviada es demasiado grande."}
    assert recognizer.detect_calls == 0


def test_unknown_room_is_400(monkeypatch, member, png_bytes):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = InMemoryAttendance(rooms={1, 2})
    container = wire_services(
        members_repo=InMemoryMembers(member),
        attendance_repo=repo,
        recognizer=FakeRecognizer(
            faces=[make_face()], candidate=IdentifyCandidate(person_id=member.person_id, confidence=0.9)
        ),
    )
    client = create_app(container=container).test_client()

    resp = client.post("/api/asistencia?sala_id=99", data=png_bytes, content_type="application/octet-stream")

    assert resp.status_code == 400
    assert resp.get_json() == {"mensaje": "sala_id 99 no existe"}
    assert repo.rows == {}


@pytest.mark.parametrize("limit", ["abc", "0"])
def test_member_history_bad_limit_is_400(client, member, limit):
    resp = client.get(f"/api/socios/{member.member_id}/asistencias?limit={limit}")

    assert resp.status_code == 400
