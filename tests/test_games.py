from sqlalchemy.orm import Session

from app.db.models.game import Game as GameModel


def _game_payload(category_id: int, **overrides) -> dict:
    payload = {
        "name": "Ticket to Ride",
        "image": "https://example.com/ttr.png",
        "stockTotal": 3,
        "categoryId": category_id,
        "pricePerDay": 1200,
    }
    payload.update(overrides)
    return payload


def test_create_game_success(client, db: Session, category):
    response = client.post("/games", json=_game_payload(category.id))
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Ticket to Ride"
    assert data["stockTotal"] == 3
    assert data["categoryId"] == category.id
    assert data["pricePerDay"] == 1200
    assert data["categoryName"] == "Strategy"


def test_create_game_unknown_category(client, db: Session):
    response = client.post("/games", json=_game_payload(9999))
    assert response.status_code == 400
    assert response.json()["code"] == "REFERENCE_NOT_FOUND"
    assert db.query(GameModel).count() == 0


def test_create_game_zero_stock(client, db: Session, category):
    response = client.post("/games", json=_game_payload(category.id, stockTotal=0))
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "stockTotal"


def test_create_game_zero_price(client, db: Session, category):
    response = client.post("/games", json=_game_payload(category.id, pricePerDay=0))
    assert response.status_code == 400


def test_create_game_price_above_limit(client, db: Session, category):
    response = client.post("/games", json=_game_payload(category.id, pricePerDay=1_000_001))
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "pricePerDay"
    assert db.query(GameModel).count() == 0


def test_create_game_missing_fields(client, db: Session, category):
    response = client.post("/games", json={"name": "Ticket to Ride"})
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"image", "stockTotal", "categoryId", "pricePerDay"}


def test_get_all_games_includes_category_name(client, db: Session, game):
    response = client.get("/games")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == game.id
    assert data[0]["categoryName"] == "Strategy"
    assert data[0]["stockTotal"] == 2
