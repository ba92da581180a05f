from sqlalchemy.orm import Session

import app.repositories.category as category_repo
import app.repositories.game as game_repo
from app.db.models.game import Game as GameModel
from app.errors import ReferentialError


def create_game(
    db: Session,
    name: str,
    image: str,
    stock_total: int,
    category_id: int,
    price_per_day: int,
) -> GameModel:
    """
    Create a game with business logic validation.

    - Validates category exists

    Raises:
        ReferentialError: If category_id does not match any category
    """
    category = category_repo.get_category_by_id(db, category_id)
    if not category:
        raise ReferentialError(f"Category with id {category_id} not found")

    return game_repo.create_game(
        db,
        name=name,
        image=image,
        stock_total=stock_total,
        category_id=category_id,
        price_per_day=price_per_day,
    )
