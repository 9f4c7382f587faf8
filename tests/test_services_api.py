from bson import ObjectId


def test_root_reports_running(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "WarmPaws Server is Running..."


def test_create_and_list_services(client, storage):
    response = client.post("/api/services", json={"name": "Grooming", "price": 40})
    assert response.status_code == 200
    ack = response.json()
    assert ack["acknowledged"] is True
    assert ObjectId.is_valid(ack["insertedId"])

    listed = client.get("/api/services").json()
    assert listed == [{"_id": ack["insertedId"], "name": "Grooming", "price": 40}]


def test_client_supplied_id_is_ignored(client, storage):
    chosen = str(ObjectId())
    ack = client.post("/api/services", json={"_id": chosen, "name": "Walking"}).json()
    assert ack["insertedId"] != chosen


def test_get_service_by_id(client, storage):
    ack = client.post("/api/services", json={"name": "Boarding"}).json()

    response = client.get(f"/api/services/{ack['insertedId']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Boarding"


def test_get_missing_service_returns_null(client):
    response = client.get(f"/api/services/{ObjectId()}")
    assert response.status_code == 200
    assert response.json() is None


def test_invalid_identifier_is_not_found(client, storage):
    response = client.get("/api/services/not-an-id")
    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid identifier: not-an-id"
    assert storage.services.find_queries == []


def test_update_merges_supplied_fields_only(client, storage):
    ack = client.post("/api/services", json={"name": "Grooming", "price": 40}).json()
    service_id = ack["insertedId"]

    response = client.put(f"/api/services/{service_id}", json={"price": 45})

    assert response.json() == {
        "acknowledged": True,
        "matchedCount": 1,
        "modifiedCount": 1,
        "upsertedId": None,
        "upsertedCount": 0,
    }
    assert client.get(f"/api/services/{service_id}").json() == {
        "_id": service_id,
        "name": "Grooming",
        "price": 45,
    }


def test_update_missing_service_acknowledges_zero(client):
    response = client.put(f"/api/services/{ObjectId()}", json={"price": 1})
    assert response.status_code == 200
    assert response.json()["matchedCount"] == 0
    assert response.json()["modifiedCount"] == 0


def test_update_without_fields_is_rejected(client):
    response = client.put(f"/api/services/{ObjectId()}", json={})
    assert response.status_code == 400


def test_delete_service_does_not_cascade(client, storage):
    ack = client.post("/api/services", json={"name": "Grooming"}).json()
    client.post("/api/bookings", json={"userId": "u1", "serviceId": ack["insertedId"]})

    response = client.delete(f"/api/services/{ack['insertedId']}")

    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert len(storage.bookings.documents) == 1
    assert client.get("/api/bookings/user/u1").json()[0]["service"] is None


def test_delete_missing_service_acknowledges_zero(client):
    response = client.delete(f"/api/services/{ObjectId()}")
    assert response.json() == {"acknowledged": True, "deletedCount": 0}
