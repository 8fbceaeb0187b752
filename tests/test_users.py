from conftest import auth_headers

USERS = "/api/v1/users/"


def test_add_user_assigns_id_and_principal(client, user_payload):
    response = client.post(USERS, json=user_payload, headers=auth_headers("alice"))
    assert response.status_code == 201
    user = response.json()
    assert user["id"] == "ID-1"
    assert user["principal"] == "alice"
    assert user["application"] == []
    assert user["phoneNumber"] == user_payload["phoneNumber"]


def test_add_user_with_empty_field_writes_nothing(client, user_payload):
    user_payload["email"] = ""
    response = client.post(USERS, json=user_payload)
    assert response.status_code == 400
    assert response.json() == {"EmptyField": "Field email is required."}
    assert client.get(USERS).json() == []


def test_add_user_with_absent_field(client, user_payload):
    del user_payload["address"]
    response = client.post(USERS, json=user_payload)
    assert response.json() == {"EmptyField": "Field address is required."}


def test_ids_are_not_reused_after_delete(client, user_payload):
    for _ in range(3):
        client.post(USERS, json=user_payload)
    assert client.delete(USERS + "ID-2").status_code == 200
    fourth = client.post(USERS, json=user_payload).json()

    assert fourth["id"] == "ID-4"
    assert [u["id"] for u in client.get(USERS).json()] == ["ID-1", "ID-3", "ID-4"]
    assert client.get(USERS + "ID-2").json() is None


def test_get_unknown_user_returns_null(client):
    response = client.get(USERS + "ID-99")
    assert response.status_code == 200
    assert response.json() is None


def test_get_user_owner_matches_caller(client, user_payload):
    client.post(USERS, json={**user_payload, "name": "Bob"}, headers=auth_headers("bob"))
    client.post(USERS, json=user_payload, headers=auth_headers("alice"))

    response = client.get(USERS + "owner", headers=auth_headers("alice"))
    assert response.status_code == 200
    assert response.json()["id"] == "ID-2"


def test_get_user_owner_not_found(client, user_payload):
    client.post(USERS, json=user_payload, headers=auth_headers("alice"))
    response = client.get(USERS + "owner", headers=auth_headers("carol"))
    assert response.status_code == 404
    assert response.json() == {"NotFound": "User with principal=carol not found"}


def test_delete_user_twice(client, user_payload):
    client.post(USERS, json=user_payload)
    first = client.delete(USERS + "ID-1")
    assert first.json() == "User with ID ID-1 deleted successfully"

    second = client.delete(USERS + "ID-1")
    assert second.status_code == 404
    assert second.json() == {"NotFound": "User with ID ID-1 not found"}
    assert client.get(USERS).json() == []
