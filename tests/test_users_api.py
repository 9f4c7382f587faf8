from bson import ObjectId


def test_user_crud(client, storage):
    ack = client.post("/api/users", json={"name": "Alice", "email": "alice@example.com"}).json()
    user_id = ack["insertedId"]

    assert client.get("/api/users").json()[0]["email"] == "alice@example.com"

    update = client.put(f"/api/users/{user_id}", json={"name": "Alice B."}).json()
    assert update["matchedCount"] == 1
    assert client.get(f"/api/users/{user_id}").json() == {
        "_id": user_id,
        "name": "Alice B.",
        "email": "alice@example.com",
    }

    assert client.delete(f"/api/users/{user_id}").json()["deletedCount"] == 1
    assert storage.users.documents == []


def test_user_invalid_id(client):
    assert client.get("/api/users/abc").status_code == 404
    assert client.put("/api/users/abc", json={"name": "x"}).status_code == 404
    assert client.delete("/api/users/abc").status_code == 404


def test_deleted_user_leaves_bookings_with_null_user(client, storage):
    user_id = client.post("/api/users", json={"name": "Bob"}).json()["insertedId"]
    client.post("/api/bookings", json={"userId": user_id, "serviceId": str(ObjectId())})
    client.delete(f"/api/users/{user_id}")

    body = client.get("/api/admin/bookings").json()

    assert len(body) == 1
    assert body[0]["user"] is None
