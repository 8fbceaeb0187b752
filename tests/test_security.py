import json

from pet_adoption_api.app.core.config import settings
from pet_adoption_api.app.core.security import (
    Identity,
    _b64_url_encode,
    _sign,
    create_access_token,
    decode_access_token,
)

from conftest import auth_headers


def test_token_round_trip():
    token = create_access_token({"sub": "alice"})
    payload = decode_access_token(token)
    assert payload["sub"] == "alice"


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "alice"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"sub": "mallory"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None


def test_expired_token_is_rejected():
    assert decode_access_token(create_access_token({"sub": "alice"}, expires_delta=-10)) is None


def test_garbage_token_is_rejected():
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None


def test_identity_compares_by_principal():
    assert Identity("alice") == Identity("alice")
    assert Identity("alice") != Identity("bob")


def test_info_reports_anonymous_principal_without_token(client):
    response = client.get("/api/v1/info/")
    assert response.status_code == 200
    assert response.json()["principal"] == settings.anonymous_principal


def test_info_reports_token_principal(client):
    response = client.get("/api/v1/info/", headers=auth_headers("alice"))
    assert response.json()["principal"] == "alice"


def test_invalid_token_is_unauthorized(client):
    response = client.get("/api/v1/info/", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def _signed_token(payload):
    header = _b64_url_encode(json.dumps({"alg": "HS256", "typ": "JWT"}).encode("utf-8"))
    body = _b64_url_encode(json.dumps(payload).encode("utf-8"))
    signature = _b64_url_encode(_sign(f"{header}.{body}".encode("utf-8"), settings.secret_key))
    return f"{header}.{body}.{signature}"


def test_signed_token_with_non_numeric_expiry_is_rejected():
    assert decode_access_token(_signed_token({"sub": "alice", "exp": "soon"})) is None
    assert decode_access_token(_signed_token({"sub": "alice", "exp": [1]})) is None


def test_non_numeric_expiry_is_unauthorized(client):
    token = _signed_token({"sub": "alice", "exp": "soon"})
    response = client.get("/api/v1/info/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
