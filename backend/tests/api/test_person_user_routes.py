"""Person & User Routes - nested references and hash-free user responses."""

VALID_ID = "8001015009087"


async def test_create_person_with_national_id(client, seed_reference):
    res = await client.post("/api/persons/", json={
        "first_name": "John",
        "last_name": "Doe",
        "email": "JOHN@example.com",
        "id_type_id": seed_reference["national_id"].id,
        "id_number": VALID_ID,
    })
    assert res.status_code == 201
    body = res.json()
    assert body["email"] == "john@example.com"
    assert body["id_type"]["code"] == "ID"
    assert body["full_name"] == "John Doe"

    res = await client.get("/api/persons/email/John@Example.com")
    assert res.status_code == 200
    assert res.json()["id"] == body["id"]


async def test_person_invalid_national_id(client, seed_reference):
    res = await client.post("/api/persons/", json={
        "last_name": "Doe",
        "id_type_id": seed_reference["national_id"].id,
        "id_number": "1234567890123",
    })
    assert res.status_code == 400
    assert res.json()["error"]["field"] == "id_number"


async def test_person_unknown_title(client, seed_reference):
    res = await client.post("/api/persons/", json={"last_name": "Doe", "title_id": 999})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "The requested title was not found."


async def test_user_response_never_exposes_hash(client, seed_reference):
    res = await client.post("/api/users/", json={"username": "alice", "password": "pw123456"})
    assert res.status_code == 201
    body = res.json()
    assert "password" not in body
    assert "password_hash" not in body
    assert body["role_names"] == ["ROLE_USER"]


async def test_user_role_grant_routes(client, seed_reference):
    user = (await client.post(
        "/api/users/", json={"username": "bob", "password": "pw123456"},
    )).json()

    res = await client.post(f"/api/users/{user['id']}/roles/ROLE_ADMIN")
    assert res.status_code == 200
    assert res.json()["role_names"] == ["ROLE_ADMIN", "ROLE_USER"]

    res = await client.delete(f"/api/users/{user['id']}/roles/ROLE_USER")
    assert res.json()["role_names"] == ["ROLE_ADMIN"]

    res = await client.post(f"/api/users/{user['id']}/roles/ROLE_GHOST")
    assert res.status_code == 404
