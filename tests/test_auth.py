import base64
import json

import pytest
from jose import jwt

from lawyer_point.auth import InvalidToken, create_access_token, decode_access_token

SECRET = "test-secret"


def test_token_round_trip():
    token = create_access_token("ada@example.com", SECRET)
    assert decode_access_token(token, SECRET) == "ada@example.com"


def test_expired_token_is_rejected():
    token = create_access_token("ada@example.com", SECRET, expires_minutes=-1)
    with pytest.raises(InvalidToken):
        decode_access_token(token, SECRET)


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token("ada@example.com", "another-secret")
    with pytest.raises(InvalidToken):
        decode_access_token(token, SECRET)


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token("ada@example.com", SECRET).split(".")
    forged = base64.urlsafe_b64encode(
        json.dumps({"email": "mallory@example.com", "exp": 4102444800}).encode()
    ).rstrip(b"=").decode()
    with pytest.raises(InvalidToken):
        decode_access_token(f"{header}.{forged}.{signature}", SECRET)


def test_token_without_email_claim_is_rejected():
    token = jwt.encode({"sub": "ada@example.com"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token, SECRET)


def test_jwt_route_refuses_unknown_email(client):
    response = client.get("/jwt", params={"email": "nobody@example.com"})
    assert response.status_code == 403


def test_jwt_route_issues_token_for_known_user(client, make_user, settings):
    make_user("ada@example.com")
    response = client.get("/jwt", params={"email": "ada@example.com"})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert decode_access_token(body["access_token"], settings.access_token_secret) == "ada@example.com"


def test_missing_authorization_header_is_401(client):
    response = client.get("/reserves", params={"email": "ada@example.com"})
    assert response.status_code == 401


def test_invalid_token_is_403(client):
    response = client.get(
        "/reserves",
        params={"email": "ada@example.com"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 403


def test_expired_token_is_403(client, auth_headers):
    response = client.get(
        "/reserves",
        params={"email": "ada@example.com"},
        headers=auth_headers("ada@example.com", expires_minutes=-1),
    )
    assert response.status_code == 403


def test_query_email_must_match_token_email(client, auth_headers):
    response = client.get(
        "/reserves",
        params={"email": "ada@example.com"},
        headers=auth_headers("mallory@example.com"),
    )
    assert response.status_code == 403


def test_own_reserves_are_listed(client, auth_headers):
    client.post("/reserves", json={
        "lawsuit": "Divorce", "email": "ada@example.com",
        "appointment_date": "2024-01-05", "time": "10:00", "price": 60,
    })
    client.post("/reserves", json={
        "lawsuit": "Divorce", "email": "bob@example.com",
        "appointment_date": "2024-01-05", "time": "11:00", "price": 60,
    })

    response = client.get(
        "/reserves",
        params={"email": "ada@example.com"},
        headers=auth_headers("ada@example.com"),
    )
    assert response.status_code == 200
    reserves = response.json()
    assert [r["email"] for r in reserves] == ["ada@example.com"]
    assert reserves[0]["paid"] is False


def test_missing_query_email_is_403(client, auth_headers):
    response = client.get("/reserves", headers=auth_headers("ada@example.com"))
    assert response.status_code == 403
