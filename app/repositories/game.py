from sqlalchemy.orm import Session, joinedload

from app.db.models.game import Game as GameModel


def get_game_by_id(db: Session, game_id: int) -> GameModel | None:
    """Get a game by ID."""
    return db.query(GameModel).filter(GameModel.id == game_id).first()


def get_all_games(db: Session) -> list[GameModel]:
    """Get all games with their category loaded (for categoryName)."""
    return (
        db.query(GameModel)
        .options(joinedload(GameModel.category))
        .order_by(GameModel.id)
        .all()
    )


def create_game(
    db: Session,
    name: str,
    image: str,
    stock_total: int,
    category_id: int,
    price_per_day: int,
) -> GameModel:
    """Create a new game in the database. Pure data access - no business logic."""
    db_game = GameModel(
        name=name,
        image=image,
        stock_total=stock_total,
        category_id=category_id,
        price_per_day=price_per_day,
        open_rentals=0,
    )
    db.add(db_game)
    db.commit()
    db.refresh(db_game)
    return db_game


class SqlGameCatalog:
    """Catalog reader backed by the games table."""

    def __init__(self, db: Session):
        self.db = db

    def get_game(self, game_id: int) -> GameModel | None:
        return get_game_by_id(self.db, game_id)
