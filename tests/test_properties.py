"""General property endpoint tests."""

from propconnect.models.user import User


def create_property(client, headers, payload):
    response = client.post("/api/properties", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_list_properties_empty_is_ok(client):
    """An empty catalogue is 200 with [] here (the buy search uses 404)."""
    response = client.get("/api/properties")
    assert response.status_code == 200
    assert response.json() == []


def test_create_property(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    assert prop["title"] == "Sunny two-bedroom"
    assert prop["propertyType"] == "Apartment"
    assert prop["featured"] is False
    assert prop["postedBy"] == auth_headers.user_id
    assert prop["agentId"] == auth_headers.user_id


def test_create_property_ignores_client_owner(client, auth_headers, other_auth_headers, make_property_payload):
    payload = make_property_payload(postedBy=other_auth_headers.user_id, agentId=other_auth_headers.user_id)
    prop = create_property(client, auth_headers, payload)
    assert prop["postedBy"] == auth_headers.user_id
    assert prop["agentId"] == auth_headers.user_id


def test_create_property_requires_token(client, make_property_payload):
    response = client.post("/api/properties", json=make_property_payload())
    assert response.status_code == 401


def test_create_property_validation(client, auth_headers, make_property_payload):
    response = client.post(
        "/api/properties", headers=auth_headers, json=make_property_payload(status="sold")
    )
    assert response.status_code == 400
    assert "status" in response.json()["errors"]


def test_list_properties_newest_first(client, auth_headers, make_property_payload):
    first = create_property(client, auth_headers, make_property_payload(title="First"))
    second = create_property(client, auth_headers, make_property_payload(title="Second"))

    response = client.get("/api/properties")
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


def test_featured_properties(client, auth_headers, make_property_payload):
    create_property(client, auth_headers, make_property_payload(title="Plain"))
    for i in range(7):
        create_property(client, auth_headers, make_property_payload(title=f"Star {i}", featured=True))

    response = client.get("/api/properties/featured")
    assert response.status_code == 200
    titles = [p["title"] for p in response.json()]
    assert len(titles) == 6
    assert "Plain" not in titles
    assert titles[0] == "Star 6"


def test_get_property(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.get(f"/api/properties/{prop['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == prop["id"]


def test_get_property_not_found(client):
    response = client.get("/api/properties/9999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Property not found"


def test_owner_updates_property(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.put(
        f"/api/properties/{prop['id']}",
        headers=auth_headers,
        json={"price": 325000, "featured": True},
    )
    assert response.status_code == 200
    assert response.json()["price"] == 325000
    assert response.json()["featured"] is True
    assert response.json()["title"] == prop["title"]


def test_update_cannot_change_owner(client, auth_headers, other_auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.put(
        f"/api/properties/{prop['id']}",
        headers=auth_headers,
        json={"postedBy": other_auth_headers.user_id, "agentId": other_auth_headers.user_id},
    )
    assert response.status_code == 200
    assert response.json()["postedBy"] == auth_headers.user_id
    assert response.json()["agentId"] == auth_headers.user_id


def test_other_user_cannot_update(client, auth_headers, other_auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.put(
        f"/api/properties/{prop['id']}",
        headers=other_auth_headers,
        json={"price": 1},
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized to update this property"

    unchanged = client.get(f"/api/properties/{prop['id']}").json()
    assert unchanged["price"] == prop["price"]


def test_update_requires_token(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.put(f"/api/properties/{prop['id']}", json={"price": 1})
    assert response.status_code == 401


def test_update_missing_property(client, auth_headers):
    response = client.put("/api/properties/9999", headers=auth_headers, json={"price": 1})
    assert response.status_code == 404


def test_owner_deletes_property(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.delete(f"/api/properties/{prop['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Property deleted successfully."
    assert response.json()["property"]["id"] == prop["id"]

    assert client.get(f"/api/properties/{prop['id']}").status_code == 404


def test_other_user_cannot_delete(client, auth_headers, other_auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.delete(f"/api/properties/{prop['id']}", headers=other_auth_headers)
    assert response.status_code == 403

    assert client.get(f"/api/properties/{prop['id']}").status_code == 200


def test_delete_with_invalid_token(client, auth_headers, make_property_payload):
    prop = create_property(client, auth_headers, make_property_payload())
    response = client.delete(
        f"/api/properties/{prop['id']}", headers={"Authorization": "Bearer forged"}
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid token."


def test_create_property_after_user_removed(client, auth_headers, db, make_property_payload):
    """A valid token for a deleted user cannot create orphaned properties."""
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.post("/api/properties", headers=auth_headers, json=make_property_payload())
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
    assert client.get("/api/properties").json() == []
