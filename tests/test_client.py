import json

import pytest
import requests

from pet_adoption_client import PetAdoptionAPI


class FakeSession:
    """Records requests and answers each with a canned response."""

    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.body = body
        self.reason = reason
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "headers": headers})
        response = requests.Response()
        response.status_code = self.status_code
        response.reason = self.reason
        response.url = url
        response._content = _encode(self.body)
        return response


def _encode(body):
    if body is None:
        return b""
    return json.dumps(body).encode("utf-8")


class UnreachableSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def make_client(session, api_key=None):
    return PetAdoptionAPI(base_url="http://pets.test/api/v1/", api_key=api_key, session=session)


def test_successful_call_returns_data():
    session = FakeSession(201, {"id": "ID-1", "name": "Rex"})
    data, error = make_client(session).add_pet({"name": "Rex"})

    assert error is None
    assert data == {"id": "ID-1", "name": "Rex"}
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://pets.test/api/v1/pets/"
    assert session.calls[0]["json"] == {"name": "Rex"}


def test_bearer_token_is_sent():
    session = FakeSession(200, {"id": "ID-1"})
    make_client(session, api_key="secret").get_user_owner()
    assert session.calls[0]["headers"] == {"Authorization": "Bearer secret"}


def test_absent_record_is_not_an_error():
    data, error = make_client(FakeSession(200, None)).get_pet("ID-9")
    assert data is None
    assert error is None


@pytest.mark.parametrize(
    "status_code, body, kind",
    [
        (404, {"NotFound": "Pet not found"}, "NotFound"),
        (400, {"EmptyField": "Field name is required."}, "EmptyField"),
        (409, {"InvalidPayload": "Adoption ID-1 is already failed"}, "InvalidPayload"),
    ],
)
def test_domain_errors_are_returned_as_values(status_code, body, kind):
    data, error = make_client(FakeSession(status_code, body, reason="Error")).complete_adoption("ID-1")
    assert data is None
    assert error == {"kind": kind, "message": next(iter(body.values())), "status_code": status_code}


def test_other_http_errors():
    session = FakeSession(401, {"detail": "Invalid or expired token"}, reason="Unauthorized")
    _, error = make_client(session).get_shelter_owner()
    assert error == {"kind": "HTTPError", "message": "Invalid or expired token", "status_code": 401}


def test_list_operation_falls_back_to_empty_list():
    data, error = make_client(FakeSession(500, None, reason="Server Error")).get_pets()
    assert data == []
    assert error["status_code"] == 500


def test_search_passes_species_as_query_parameter():
    session = FakeSession(200, [{"species": "Dog"}])
    data, _ = make_client(session).search_pets_by_species("dog")
    assert data == [{"species": "Dog"}]
    assert session.calls[0]["params"] == {"species": "dog"}


def test_update_pet_info_sends_camel_case_body():
    session = FakeSession(200, {})
    make_client(session).update_pet_info("ID-1", "healthy", "4")
    call = session.calls[0]
    assert (call["method"], call["url"]) == ("PUT", "http://pets.test/api/v1/pets/ID-1")
    assert call["json"] == {"healthStatus": "healthy", "age": "4"}


def test_unreachable_server():
    data, error = make_client(UnreachableSession()).get_users()
    assert data == []
    assert error["kind"] is None
    assert "connection refused" in error["message"]
