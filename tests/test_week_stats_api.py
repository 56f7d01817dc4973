from habit_tracker.models import ActionTemplate


def test_week_stats_requires_date_key(client):
    response = client.get("/api/week-stats")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "dateKey is required"}


def test_week_stats_rejects_malformed_date_key(client):
    response = client.get("/api/week-stats", params={"dateKey": "2024/01/02"})

    assert response.status_code == 400
    assert response.json()["ok"] is False
    assert "2024/01/02" in response.json()["error"]


def test_week_stats_rejects_week_past_last_date(client):
    response = client.get("/api/week-stats", params={"dateKey": "9999-12-31"})

    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_week_stats_end_to_end(client, db):
    db.add(ActionTemplate(id="A", name="Vocabulary", category="study"))
    db.add(ActionTemplate(id="B", name="Lecture", category="study"))
    db.commit()
    for action_id, date_key in [("A", "2024-01-02"), ("A", "2024-01-02"), ("B", "2024-01-03")]:
        client.post("/api/action-logs", json={"actionId": action_id, "dateKey": date_key})

    response = client.get("/api/week-stats", params={"dateKey": "2024-01-07"})

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "weekStart": "2024-01-01",
        "weekEnd": "2024-01-07",
        "data": {
            "exercise": {"days": 0, "total": 7},
            "study": {"days": 2, "total": 7},
            "other": {"days": 0, "total": 7},
        },
    }


def test_week_stats_counts_logs_of_unknown_actions_as_other(client):
    client.post("/api/action-logs", json={"actionId": "orphan", "dateKey": "2024-01-04"})

    data = client.get("/api/week-stats", params={"dateKey": "2024-01-04"}).json()["data"]

    assert data["other"] == {"days": 1, "total": 7}


def test_week_stats_rolls_over_out_of_range_day(client):
    response = client.get("/api/week-stats", params={"dateKey": "2024-01-32"})

    assert response.status_code == 200
    assert response.json()["weekStart"] == "2024-01-29"
    assert response.json()["weekEnd"] == "2024-02-04"
