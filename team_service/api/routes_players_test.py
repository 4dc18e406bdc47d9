from fastapi import status

from team_service.db.models import Base
from team_service.db.unit_of_work import SaveResult
from team_service.services import players as players_service


def _create(client, first="Jane", last="Doe"):
    response = client.post("/players", json={"first_name": first, "last_name": last})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


# ------------------------
# Tests
# ------------------------
def test_create_player_returns_location(client):
    response = client.post("/players", json={"first_name": "Jane", "last_name": "Doe"})
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["first_name"] == "Jane"
    assert body["last_name"] == "Doe"
    assert body["team_id"] is None
    assert response.headers["location"].endswith(f"/players/{body['id']}")


def test_create_player_missing_last_name(client):
    response = client.post("/players", json={"first_name": "Jane"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get("/players").json() == []


def test_get_player(client):
    created = _create(client)
    response = client.get(f"/players/{created['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == created


def test_get_player_not_found(client):
    assert client.get("/players/404").status_code == status.HTTP_404_NOT_FOUND


def test_negative_id_rejected_by_routing(client):
    assert client.get("/players/-1").status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_list_players_paging_and_filter(client):
    for i in range(12):
        _create(client, first=f"P{i}", last="Doe")
    _create(client, first="Ann", last="Smith")

    assert len(client.get("/players", params={"itemsPerPage": 5}).json()) == 10
    assert len(client.get("/players", params={"page": 2}).json()) == 3
    assert client.get("/players", params={"page": 0}).json() == client.get("/players").json()

    smiths = client.get("/players", params={"lastName": "Smith"}).json()
    assert [p["first_name"] for p in smiths] == ["Ann"]
    assert client.get("/players", params={"lastName": "smith"}).json() == []


def test_replace_player(client):
    created = _create(client)
    response = client.put(
        f"/players/{created['id']}",
        json={"id": created["id"], "first_name": "Janet", "last_name": "Roe"},
    )
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""
    assert client.get(f"/players/{created['id']}").json()["first_name"] == "Janet"


def test_replace_player_id_mismatch(client):
    created = _create(client)
    response = client.put(
        f"/players/{created['id']}",
        json={"id": created["id"] + 1, "first_name": "Janet", "last_name": "Roe"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_replace_player_not_found(client):
    response = client.put("/players/50", json={"id": 50, "first_name": "A", "last_name": "B"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_player(client):
    created = _create(client)
    assert client.delete(f"/players/{created['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/players/{created['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/players/{created['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_store_unavailable(client, engine):
    Base.metadata.drop_all(bind=engine)
    assert client.get("/players").status_code == status.HTTP_404_NOT_FOUND
    response = client.post("/players", json={"first_name": "Jane", "last_name": "Doe"})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


def test_unrecoverable_conflict_is_server_error(client, monkeypatch):
    created = _create(client)

    def fake_save(session):
        session.rollback()
        return SaveResult.CONFLICT

    monkeypatch.setattr(players_service, "save_changes", fake_save)
    response = client.put(f"/players/{created['id']}", json={"id": created["id"], "first_name": "A", "last_name": "B"})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert client.delete(f"/players/{created['id']}").status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert client.get(f"/players/{created['id']}").json()["first_name"] == "Jane"
