"""Permit rules API: CRUD, clone and error bodies."""

from datetime import datetime

from httpx import AsyncClient

BASE = "/api/permit-rules"


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value)


async def _create(client: AsyncClient, headers: dict[str, str], payload: dict) -> dict:
    response = await client.post(BASE, json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


async def test_create_assigns_id_and_updated_at(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """POST returns the stored row with store-assigned id and updated_at."""
    data = await _create(client, auth_headers, permit_rule_payload)
    assert isinstance(data["id"], int)
    assert data["updated_at"]
    for key, value in permit_rule_payload.items():
        assert data[key] == value


async def test_create_ignores_client_supplied_id(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """id and updated_at in the body are dropped; the store assigns them."""
    body = {**permit_rule_payload, "id": 999, "updated_at": "2000-01-01T00:00:00Z"}
    data = await _create(client, auth_headers, body)
    assert data["id"] != 999
    assert not data["updated_at"].startswith("2000-01-01")


async def test_create_missing_field_returns_422(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """A body without a required field is rejected with an error message."""
    body = dict(permit_rule_payload)
    del body["title"]
    response = await client.post(BASE, json=body, headers=auth_headers)
    assert response.status_code == 422
    assert response.json()["error"] == "Request validation failed"


async def test_list_is_newest_first(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """GET lists rows by id descending."""
    first = await _create(client, auth_headers, permit_rule_payload)
    second = await _create(
        client, auth_headers, {**permit_rule_payload, "title": "Second"}
    )
    response = await client.get(BASE, headers=auth_headers)
    assert response.status_code == 200
    ids = [row["id"] for row in response.json()]
    assert ids == [second["id"], first["id"]]


async def test_list_empty(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(BASE, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


async def test_get_by_id(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    created = await _create(client, auth_headers, permit_rule_payload)
    response = await client.get(f"{BASE}/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == created


async def test_get_missing_returns_404_with_error(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(f"{BASE}/4242", headers=auth_headers)
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "permit_rule not found: 4242"
    assert body["code"] == "RESOURCE_NOT_FOUND"


async def test_update_changes_only_given_fields(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """PUT with one field leaves the others unchanged and refreshes updated_at."""
    created = await _create(client, auth_headers, permit_rule_payload)
    response = await client.put(
        f"{BASE}/{created['id']}", json={"title": "Renamed"}, headers=auth_headers
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Renamed"
    assert updated["rule"] == created["rule"]
    assert updated["category"] == created["category"]
    assert updated["id"] == created["id"]
    assert _ts(updated["updated_at"]) > _ts(created["updated_at"])


async def test_update_with_empty_body_refreshes_updated_at(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    created = await _create(client, auth_headers, permit_rule_payload)
    response = await client.put(f"{BASE}/{created['id']}", json={}, headers=auth_headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == created["title"]
    assert _ts(updated["updated_at"]) > _ts(created["updated_at"])


async def test_update_rejects_null_for_required_field(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    created = await _create(client, auth_headers, permit_rule_payload)
    response = await client.put(
        f"{BASE}/{created['id']}", json={"title": None}, headers=auth_headers
    )
    assert response.status_code == 422


async def test_update_missing_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.put(f"{BASE}/77", json={"title": "x"}, headers=auth_headers)
    assert response.status_code == 404
    assert "error" in response.json()


async def test_delete_then_get_returns_404(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    created = await _create(client, auth_headers, permit_rule_payload)
    response = await client.delete(f"{BASE}/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    response = await client.get(f"{BASE}/{created['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_delete_missing_still_succeeds(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """Deleting an id that does not exist reports success."""
    response = await client.delete(f"{BASE}/31337", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}


async def test_clone_copies_content_with_new_id(
    client: AsyncClient, auth_headers: dict[str, str], permit_rule_payload: dict
) -> None:
    """Clone has a new id and fresh updated_at; every other field is equal."""
    source = await _create(client, auth_headers, permit_rule_payload)
    response = await client.post(f"{BASE}/{source['id']}/clone", headers=auth_headers)
    assert response.status_code == 200
    clone = response.json()
    assert clone["id"] != source["id"]
    assert _ts(clone["updated_at"]) >= _ts(source["updated_at"])
    for key in ("permit_type", "title", "rule", "category", "is_required"):
        assert clone[key] == source[key]

    listing = (await client.get(BASE, headers=auth_headers)).json()
    assert [row["id"] for row in listing] == [clone["id"], source["id"]]


async def test_clone_missing_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(f"{BASE}/5/clone", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "permit_rule not found: 5"
