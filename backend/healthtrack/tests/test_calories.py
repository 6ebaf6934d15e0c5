"""
Tests for calorie tracker endpoints.
"""

ENTRY = {
    "foodInput": "oatmeal",
    "calInput": 150,
    "priceInput": 1.25,
    "fatInput": 3,
    "carbsInput": 27,
    "proteinInput": 5,
}


def test_calorie_entry_lifecycle(client, headers_for):
    alice = headers_for("alice")

    response = client.post("/api/calories", json=ENTRY, headers=alice)
    assert response.status_code == 201
    [record] = response.json()["list"]
    assert record["foodInput"] == "oatmeal"
    assert record["calInput"] == 150
    assert float(record["priceInput"]) == 1.25

    response = client.put(f"/api/calories/{record['id']}", json={**ENTRY, "calInput": 200}, headers=alice)
    assert response.json()["list"][0]["calInput"] == 200

    client.post("/api/calories", json={**ENTRY, "foodInput": "apple"}, headers=alice)
    response = client.delete(f"/api/calories/{record['id']}", headers=alice)
    assert [entry["foodInput"] for entry in response.json()["list"]] == ["apple"]


def test_calorie_entries_are_per_user(client, headers_for):
    alice = headers_for("alice")
    bob = headers_for("bob")
    record_id = client.post("/api/calories", json=ENTRY, headers=alice).json()["list"][0]["id"]

    assert client.get("/api/calories", headers=bob).json() == {"list": []}
    assert client.delete(f"/api/calories/{record_id}", headers=bob).json() == {"list": []}
    assert len(client.get("/api/calories", headers=alice).json()["list"]) == 1


def test_calorie_totals(client, headers_for):
    alice = headers_for("alice")
    assert client.get("/api/calorie-totals", headers=alice).json() == {"total": []}

    response = client.post("/api/calorie-totals", headers=alice)
    assert response.status_code == 201
    [total] = response.json()["total"]
    assert (total["calTotal"], total["carbsTotal"], total["proteinTotal"], total["fatTotal"]) == (0, 0, 0, 0)

    totals = {"calTotal": 350, "priceTotal": 4.5, "carbsTotal": 40, "proteinTotal": 20, "fatTotal": 8}
    response = client.put("/api/calorie-totals", json=totals, headers=alice)
    [updated] = response.json()["total"]
    assert updated["id"] == total["id"]
    assert updated["calTotal"] == 350
    assert float(updated["priceTotal"]) == 4.5

    # Creating again keeps the single existing row
    response = client.post("/api/calorie-totals", headers=alice)
    assert response.status_code == 200
    assert [row["calTotal"] for row in response.json()["total"]] == [350]
