from sih_portal.db.base import Base
from sih_portal.db.session import create_db_engine, create_session_factory
from sih_portal.main import check_database


def test_submit_returns_created_record(client, submission_payload):
    response = client.post("/api/submit", json=submission_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["team_id"] == "001_SIH"
    assert body["problem_id"] == 25010
    assert body["problem_code"] == "SIH25010"
    assert body["slides_link"] == submission_payload["slides_link"]
    assert body["presented"] is False
    assert "created_at" in body
    assert "ordinal" not in body


def test_third_submit_is_a_client_error(client, submission_payload):
    assert client.post("/api/submit", json=submission_payload).status_code == 200
    assert client.post("/api/submit", json=submission_payload).status_code == 200

    response = client.post("/api/submit", json=submission_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Submission limit reached. Only 2 allowed per team."}
    assert len(client.get("/api/submissions").json()) == 2


def test_invalid_payload_names_the_failing_fields(client, submission_payload):
    submission_payload["phone"] = "12345"
    submission_payload["slides_link"] = "not a url"

    response = client.post("/api/submit", json=submission_payload)

    assert response.status_code == 400
    error = response.json()["error"]
    assert "phone" in error
    assert "slides_link" in error
    assert client.get("/api/submissions").json() == []


def test_missing_body_is_a_validation_error(client):
    response = client.post("/api/submit", json={})
    assert response.status_code == 400
    assert "team_id" in response.json()["error"]


def test_non_numeric_problem_code_is_accepted_with_id_zero(client, submission_payload):
    submission_payload["problem_code"] = "SIHxx"
    response = client.post("/api/submit", json=submission_payload)
    assert response.status_code == 200
    assert response.json()["problem_id"] == 0


def test_list_search_and_sort(client, submission_payload):
    for team_id, code in [("001_SIH", "SIH25010"), ("002_SIH", "SIH25003"), ("010_SIH", "SIH25007")]:
        payload = {**submission_payload, "team_id": team_id, "problem_code": code}
        assert client.post("/api/submit", json=payload).status_code == 200

    everything = client.get("/api/submissions").json()
    assert [s["team_id"] for s in everything] == ["001_SIH", "002_SIH", "010_SIH"]

    found = client.get("/api/submissions", params={"search": "01"}).json()
    assert {s["team_id"] for s in found} == {"001_SIH", "010_SIH"}

    found = client.get("/api/submissions", params={"search": "sih"}).json()
    assert len(found) == 3

    ascending = client.get("/api/submissions", params={"sort": "problem_id", "order": "asc"}).json()
    assert [s["problem_id"] for s in ascending] == [25003, 25007, 25010]

    descending = client.get("/api/submissions", params={"sort": "problem_id", "order": "desc"}).json()
    assert [s["problem_id"] for s in descending] == [25010, 25007, 25003]

    unknown = client.get("/api/submissions", params={"sort": "password", "order": "asc"}).json()
    assert [s["team_id"] for s in unknown] == ["001_SIH", "002_SIH", "010_SIH"]


def test_mark_presented(client, submission_payload):
    created = client.post("/api/submit", json=submission_payload).json()

    response = client.patch(f"/api/submissions/{created['id']}/presented")
    assert response.status_code == 200
    assert response.json()["presented"] is True
    assert client.get("/api/submissions").json()[0]["presented"] is True


def test_mark_presented_unknown_submission(client):
    response = client.patch("/api/submissions/999/presented")
    assert response.status_code == 404
    assert response.json() == {"error": "Submission not found"}


def test_delete_frees_the_slot(client, submission_payload):
    first = client.post("/api/submit", json=submission_payload).json()
    client.post("/api/submit", json=submission_payload)

    response = client.delete(f"/api/submissions/{first['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert client.post("/api/submit", json=submission_payload).status_code == 200
    assert len(client.get("/api/submissions").json()) == 2


def test_delete_unknown_submission_still_succeeds(client):
    response = client.delete("/api/submissions/12345")
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_storage_failure_is_a_server_error(app, client, submission_payload):
    Base.metadata.drop_all(bind=app.state.engine)

    response = client.post("/api/submit", json=submission_payload)

    assert response.status_code == 500
    assert "no such table" in response.json()["error"]


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["database"] == "connected"
    assert body["redis"] == "not configured"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_oversized_problem_number_falls_back_to_zero(client, submission_payload):
    submission_payload["problem_code"] = "SIH" + "9" * 25

    response = client.post("/api/submit", json=submission_payload)

    assert response.status_code == 200
    assert response.json()["problem_id"] == 0
    assert response.json()["problem_code"] == "SIH" + "9" * 25


def test_created_at_carries_utc_offset(client, submission_payload):
    created = client.post("/api/submit", json=submission_payload).json()
    assert created["created_at"].endswith(("Z", "+00:00"))

    listed = client.get("/api/submissions").json()[0]
    assert listed["created_at"].endswith(("Z", "+00:00"))


def test_health_reports_unreachable_database(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")
    assert check_database(create_session_factory(engine)) is False
    engine.dispose()
