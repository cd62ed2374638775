from conftest import ASSIGNMENTS


def event(assignment_id: str, event_type: str, severity: str = "info", at: str = "10:15:00", **details) -> dict:
    return {
        "assignment_id": assignment_id,
        "event_type": event_type,
        "severity": severity,
        "timestamp": f"2026-03-02T{at}Z",
        "details": details,
    }


def test_start_answer_submit_flow(client):
    assignment_id = ASSIGNMENTS["pending"]

    r = client.post("/exam/start", json={"assignment_id": assignment_id})
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "in_progress"
    assert r.json()["started_at"] is not None

    r = client.post(
        "/exam/answer",
        json={"assignment_id": assignment_id, "question_id": "q1", "answer_text": "x = 2"},
    )
    assert r.status_code == 200, r.text
    first_id = r.json()["id"]

    # answering the same question again replaces the answer
    r = client.post(
        "/exam/answer",
        json={"assignment_id": assignment_id, "question_id": "q1", "answer_numeric": 2.0},
    )
    assert r.status_code == 200, r.text
    assert r.json()["id"] == first_id
    assert r.json()["answer_text"] is None
    assert r.json()["answer_numeric"] == 2.0

    r = client.post("/exam/submit", json={"assignment_id": assignment_id})
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "submitted"
    assert r.json()["submitted_at"] is not None


def test_answer_carries_one_value(client):
    r = client.post(
        "/exam/answer",
        json={
            "assignment_id": ASSIGNMENTS["in_progress"],
            "question_id": "q1",
            "answer_text": "42",
            "selected_option_id": "opt-a",
        },
    )
    assert r.status_code == 422


def test_answers_only_while_in_progress(client):
    r = client.post(
        "/exam/answer",
        json={"assignment_id": ASSIGNMENTS["submitted"], "question_id": "q9", "answer_text": "late"},
    )
    assert r.status_code == 409


def test_status_never_moves_backward(client):
    r = client.post("/exam/start", json={"assignment_id": ASSIGNMENTS["submitted"]})
    assert r.status_code == 409

    r = client.post("/exam/submit", json={"assignment_id": ASSIGNMENTS["graded"]})
    assert r.status_code == 409


def test_start_unknown_assignment(client):
    r = client.post("/exam/start", json={"assignment_id": "nope"})
    assert r.status_code == 404


def test_record_and_list_events(client):
    assignment_id = ASSIGNMENTS["in_progress"]

    r = client.post("/exam/event", json=event(assignment_id, "tab_hidden", "warning", at="10:15:00", duration_seconds=12))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["event_type"] == "tab_hidden"
    assert body["details"] == {"duration_seconds": 12}

    r = client.post("/exam/event", json=event(assignment_id, "paste", "critical", at="10:16:30", pasted_length=480))
    assert r.status_code == 201, r.text

    r = client.get("/exam/event", params={"assignment_id": assignment_id})
    assert r.status_code == 200
    assert [e["event_type"] for e in r.json()] == ["tab_hidden", "paste"]


def test_event_summary(client):
    assignment_id = ASSIGNMENTS["in_progress"]
    client.post("/exam/event", json=event(assignment_id, "tab_hidden", "warning"))
    client.post("/exam/event", json=event(assignment_id, "tab_hidden", "warning"))
    client.post("/exam/event", json=event(assignment_id, "devtools_open", "critical"))

    r = client.get("/exam/event/summary", params={"assignment_id": assignment_id})
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 3
    assert body["by_severity"] == {"warning": 2, "critical": 1}
    assert body["by_type"] == {"tab_hidden": 2, "devtools_open": 1}


def test_event_requires_assignment_id(client):
    assert client.get("/exam/event").status_code == 400
    assert client.get("/exam/event/summary").status_code == 400


def test_unknown_event_type_is_rejected(client):
    r = client.post("/exam/event", json=event(ASSIGNMENTS["in_progress"], "mind_reading"))
    assert r.status_code == 422
