"""Tests for expand, source and similar endpoints."""

from fastapi import status


def test_read_satellites(client, test_post) -> None:
    params = {"freetId": test_post.id}

    expand = client.get("/api/v1/expands", params=params)
    assert expand.status_code == status.HTTP_200_OK
    assert expand.json() == {
        "id": test_post.expand_content_id,
        "freetId": test_post.id,
        "content": "Tomatoes need sun.",
    }

    sources = client.get("/api/v1/sources", params=params).json()
    assert sources["sourceOne"] == "almanac"
    assert sources["freetId"] == test_post.id

    similar = client.get("/api/v1/similar", params=params).json()
    assert similar["similarPostIdOne"] is None
    assert similar["similarPostIdTwo"] is None


def test_read_satellites_unknown_freet(client) -> None:
    for path in ("/api/v1/expands", "/api/v1/sources", "/api/v1/similar"):
        response = client.get(path, params={"freetId": "nope"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "freetNotFound" in response.json()["error"]


def test_replace_expand(client, test_post, auth_token) -> None:
    old_expand_id = test_post.expand_content_id
    post_id = test_post.id

    response = client.patch(
        "/api/v1/expands",
        json={"id": str(post_id), "content": "Water daily."},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["expandContent"] == "Water daily."
    assert response.json()["expandContentId"] != old_expand_id


def test_replace_expand_gate_order(client, test_post, auth_token, other_auth_token) -> None:
    anonymous = client.patch("/api/v1/expands", json={"id": test_post.id, "content": "x"})
    assert anonymous.status_code == status.HTTP_403_FORBIDDEN

    missing_id = client.patch("/api/v1/expands", json={"content": "x"}, headers=auth_token)
    assert missing_id.status_code == status.HTTP_400_BAD_REQUEST
    assert missing_id.json() == {"error": "Missing id"}

    unknown = client.patch(
        "/api/v1/expands", json={"id": 999999, "content": "x"}, headers=auth_token
    )
    assert unknown.status_code == status.HTTP_401_UNAUTHORIZED

    not_author = client.patch(
        "/api/v1/expands", json={"id": test_post.id, "content": "x"}, headers=other_auth_token
    )
    assert not_author.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    too_long = client.patch(
        "/api/v1/expands", json={"id": test_post.id, "content": "y" * 1401}, headers=auth_token
    )
    assert too_long.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
