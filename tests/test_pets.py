PETS = "/api/v1/pets/"


def test_add_pet_defaults_to_not_adopted(client, pet_payload):
    response = client.post(PETS, json=pet_payload)
    assert response.status_code == 201
    pet = response.json()
    assert pet["id"] == "ID-1"
    assert pet["status"] == "notAdopted"
    assert pet["shelterId"] == "ID-1"


def test_add_pet_requires_every_field(client, pet_payload):
    pet_payload["healthStatus"] = ""
    response = client.post(PETS, json=pet_payload)
    assert response.status_code == 400
    assert response.json() == {"EmptyField": "Field healthStatus is required."}
    assert client.get(PETS).json() == []


def test_update_pet_info_changes_only_health_and_age(client, pet_payload):
    original = client.post(PETS, json=pet_payload).json()

    response = client.put(PETS + "ID-1", json={"healthStatus": "recovering", "age": "4"})
    assert response.status_code == 200

    stored = client.get(PETS + "ID-1").json()
    assert stored["healthStatus"] == "recovering"
    assert stored["age"] == "4"
    for field in ("id", "name", "species", "breed", "gender", "petImage", "description", "shelterId", "status"):
        assert stored[field] == original[field]


def test_update_unknown_pet(client):
    response = client.put(PETS + "ID-5", json={"healthStatus": "ok", "age": "1"})
    assert response.status_code == 404
    assert response.json() == {"NotFound": "Pet not found"}


def test_search_by_species_ignores_case(client, pet_payload):
    client.post(PETS, json=pet_payload)
    client.post(PETS, json={**pet_payload, "name": "Tom", "species": "cat"})
    client.post(PETS, json={**pet_payload, "name": "Fido", "species": "DOG"})

    upper = client.get(PETS + "search", params={"species": "Dog"}).json()
    lower = client.get(PETS + "search", params={"species": "dog"}).json()
    assert upper == lower
    assert [pet["name"] for pet in lower] == ["Rex", "Fido"]
    assert client.get(PETS + "search", params={"species": "dogs"}).json() == []


def test_not_adopted_lists_available_pets(client, pet_payload):
    client.post(PETS, json=pet_payload)
    client.post(PETS, json={**pet_payload, "name": "Tom"})
    names = [pet["name"] for pet in client.get(PETS + "not-adopted").json()]
    assert names == ["Rex", "Tom"]


def test_add_pet_image_replaces_row(client, pet_payload):
    client.post(PETS, json=pet_payload)

    response = client.post(PETS + "image", json={"petId": "ID-1", "petImage": "new.png"})
    assert response.status_code == 200
    assert response.json() == {"petId": "ID-1", "petImage": "new.png"}

    stored = client.get(PETS + "ID-1").json()
    assert stored["petImage"] == "new.png"
    assert stored["name"] is None
    assert stored["status"] is None


def test_add_pet_image_requires_pet_id(client):
    response = client.post(PETS + "image", json={"petImage": "new.png"})
    assert response.status_code == 400
    assert response.json() == {"EmptyField": "Field petId is required."}


def test_delete_pet(client, pet_payload):
    client.post(PETS, json=pet_payload)
    assert client.delete(PETS + "ID-1").json() == "Pet with ID ID-1 deleted successfully"
    assert client.get(PETS + "ID-1").json() is None
    assert client.delete(PETS + "ID-1").json() == {"NotFound": "Pet with ID ID-1 not found"}


def test_deleted_pet_id_is_not_reused(client, pet_payload):
    client.post(PETS, json=pet_payload)
    client.delete(PETS + "ID-1")
    assert client.post(PETS, json=pet_payload).json()["id"] == "ID-2"
    assert [pet["id"] for pet in client.get(PETS).json()] == ["ID-2"]
