"""Tests for account and session endpoints."""

from fastapi import status

from fritter.api.v1.endpoints import users as users_endpoint


def test_create_account_and_sign_in(client) -> None:
    created = client.post("/api/v1/users/", json={"username": "dana", "password": "pw"})
    assert created.status_code == status.HTTP_201_CREATED
    assert created.json()["username"] == "dana"

    signed_in = client.post("/api/v1/users/session", json={"username": "DANA", "password": "pw"})
    assert signed_in.status_code == status.HTTP_200_OK
    token = signed_in.json()["accessToken"]

    me = client.delete("/api/v1/users/session", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == status.HTTP_200_OK


def test_create_account_validation(client, test_user, auth_token) -> None:
    bad_name = client.post("/api/v1/users/", json={"username": "no spaces", "password": "pw"})
    assert bad_name.status_code == 400
    assert "username" in bad_name.json()["error"]

    bad_password = client.post("/api/v1/users/", json={"username": "erin", "password": "a b"})
    assert bad_password.status_code == 400
    assert "password" in bad_password.json()["error"]

    taken = client.post("/api/v1/users/", json={"username": "Alice", "password": "pw"})
    assert taken.status_code == status.HTTP_409_CONFLICT

    signed_in = client.post(
        "/api/v1/users/", json={"username": "frank", "password": "pw"}, headers=auth_token
    )
    assert signed_in.status_code == status.HTTP_403_FORBIDDEN
    assert signed_in.json() == {"error": "You are already signed in."}


def test_create_account_rejects_trailing_newline(client, test_user) -> None:
    password = client.post("/api/v1/users/", json={"username": "carol", "password": "pw\n"})
    assert password.status_code == status.HTTP_400_BAD_REQUEST
    assert "password" in password.json()["error"]

    username = client.post("/api/v1/users/", json={"username": "alice\n", "password": "pw"})
    assert username.status_code == status.HTTP_400_BAD_REQUEST
    assert "username" in username.json()["error"]


def test_sign_in_wrong_password(client, test_user) -> None:
    response = client.post("/api/v1/users/session", json={"username": "alice", "password": "x"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Invalid user login credentials provided."}


def test_sign_out_requires_login(client) -> None:
    assert client.delete("/api/v1/users/session").status_code == status.HTTP_403_FORBIDDEN


def test_update_account(client, test_user, other_user, auth_token) -> None:
    recased = client.patch("/api/v1/users/", json={"username": "ALICE"}, headers=auth_token)
    assert recased.status_code == status.HTTP_200_OK
    assert recased.json()["username"] == "ALICE"

    taken = client.patch("/api/v1/users/", json={"username": "bob"}, headers=auth_token)
    assert taken.status_code == status.HTTP_409_CONFLICT

    password = client.patch("/api/v1/users/", json={"password": "fresh"}, headers=auth_token)
    assert password.status_code == status.HTTP_200_OK
    signed_in = client.post("/api/v1/users/session", json={"username": "alice", "password": "fresh"})
    assert signed_in.status_code == status.HTTP_200_OK


def test_delete_account_removes_all_freets(client, freet_service, test_user, auth_token, other_user) -> None:
    ids = [
        client.post(
            "/api/v1/freets/",
            json={"content": f"post {n}", "expandContent": "e", "sourceOne": "s"},
            headers=auth_token,
        ).json()["id"]
        for n in range(3)
    ]

    response = client.delete("/api/v1/users/", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert freet_service.find_all_by_username("alice") == []
    for freet_id in ids:
        assert freet_service.expand_for(freet_id) is None
        assert freet_service.sources_for(freet_id) is None
        assert freet_service.similar_for(freet_id) is None

    # The stale token now names a user that no longer exists.
    again = client.delete("/api/v1/users/", headers=auth_token)
    assert again.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert "userNotFound" in again.json()["error"]


def test_sign_in_without_matching_user_returns_401(client, test_user, monkeypatch) -> None:
    class EmptyDirectory:
        def __init__(self, session):
            pass

        def find_by_username_and_password(self, username, password):
            return None

    monkeypatch.setattr(users_endpoint, "UserDirectory", EmptyDirectory)

    response = client.post(
        "/api/v1/users/session", json={"username": "alice", "password": "alice-pass"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert "accessToken" not in response.json()
