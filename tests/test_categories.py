from sqlalchemy.orm import Session

from app.db.models.category import Category as CategoryModel


def test_create_category_success(client, db: Session):
    response = client.post("/categories", json={"name": "Party"})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Party"
    assert "id" in data


def test_create_category_duplicate_name(client, db: Session, category):
    response = client.post("/categories", json={"name": category.name})
    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_RESOURCE"
    assert db.query(CategoryModel).count() == 1


def test_create_category_empty_name(client, db: Session):
    response = client.post("/categories", json={"name": ""})
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "name"


def test_create_category_missing_name(client, db: Session):
    response = client.post("/categories", json={})
    assert response.status_code == 400


def test_get_all_categories(client, db: Session, category):
    client.post("/categories", json={"name": "Party"})

    response = client.get("/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Strategy", "Party"]
