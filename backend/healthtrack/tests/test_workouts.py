"""
Tests for workout tracker endpoints.
"""

WORKOUT = {"date": "2024-01-01", "workout": "run", "duration": 30}


def test_workout_lifecycle(client, headers_for):
    """Insert, list, soft-delete; another user never sees the record."""
    alice = headers_for("alice")
    bob = headers_for("bob")

    response = client.post("/api/workouts", json=WORKOUT, headers=alice)
    assert response.status_code == 201
    [record] = response.json()["list"]
    assert {key: record[key] for key in ("date", "workout", "duration", "deletedFlag")} == {
        **WORKOUT, "deletedFlag": False
    }

    assert client.get("/api/workouts", headers=alice).json()["list"] == [record]
    assert client.get("/api/workouts", headers=bob).json() == {"list": []}

    response = client.delete(f"/api/workouts/{record['id']}", headers=alice)
    assert response.status_code == 200
    assert response.json() == {"list": []}
    assert client.get("/api/workouts", headers=alice).json() == {"list": []}
    assert client.get("/api/workouts", headers=bob).json() == {"list": []}


def test_update_workout(client, headers_for):
    alice = headers_for("alice")
    record_id = client.post("/api/workouts", json=WORKOUT, headers=alice).json()["list"][0]["id"]

    response = client.put(
        f"/api/workouts/{record_id}",
        json={"date": "2024-01-02", "workout": "swim", "duration": 45},
        headers=alice
    )
    assert response.status_code == 200
    [record] = response.json()["list"]
    assert (record["id"], record["date"], record["workout"], record["duration"]) == (
        record_id, "2024-01-02", "swim", 45
    )


def test_other_user_cannot_touch_workout(client, headers_for):
    alice = headers_for("alice")
    bob = headers_for("bob")
    record_id = client.post("/api/workouts", json=WORKOUT, headers=alice).json()["list"][0]["id"]

    assert client.delete(f"/api/workouts/{record_id}", headers=bob).json() == {"list": []}
    assert client.put(
        f"/api/workouts/{record_id}",
        json={"date": "2024-01-02", "workout": "swim", "duration": 45},
        headers=bob
    ).json() == {"list": []}

    [record] = client.get("/api/workouts", headers=alice).json()["list"]
    assert (record["workout"], record["duration"]) == ("run", 30)


def test_user_id_comes_from_token(client, headers_for, codec):
    """A userId in the body is ignored."""
    alice = headers_for("alice")
    alice_id = codec.verify(alice["Authorization"].split(" ")[1]).user_id

    response = client.post("/api/workouts", json={**WORKOUT, "userId": alice_id + 1}, headers=alice)
    assert response.json()["list"][0]["userId"] == alice_id


def test_invalid_workout_payload(client, headers_for):
    response = client.post(
        "/api/workouts",
        json={"date": "2024-01-01", "workout": "run", "duration": -1},
        headers=headers_for("alice")
    )
    assert response.status_code == 422
