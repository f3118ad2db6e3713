"""Agent application endpoint tests."""


def test_submit_application(client):
    response = client.post(
        "/api/becomeagent",
        json={
            "firstName": "Dana",
            "lastName": "Reyes",
            "email": "dana@example.com",
            "phone": "555-0100",
            "experience": "4",
            "licenseNumber": "LIC-2231",
            "about": "Residential sales",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Agent application submitted successfully"
    application = data["application"]
    assert application["status"] == "pending"
    assert application["experience"] == 4
    assert application["submittedAt"] is not None


def test_submit_application_without_about(client):
    response = client.post(
        "/api/becomeagent",
        json={
            "firstName": "Dana",
            "lastName": "Reyes",
            "email": "dana@example.com",
            "phone": "555-0100",
            "experience": 0,
            "licenseNumber": "LIC-2231",
        },
    )
    assert response.status_code == 201
    assert response.json()["application"]["about"] is None


def test_submit_application_missing_fields(client):
    response = client.post(
        "/api/becomeagent",
        json={"firstName": "Dana", "email": "dana@example.com"},
    )
    assert response.status_code == 400
    errors = response.json()["errors"]
    for field in ("lastName", "phone", "experience", "licenseNumber"):
        assert field in errors
