from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.game as game_repo
from app.services.game import create_game
from app.schemas.game import Game, GameCreate

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[Game])
def get_all_games(db: Session = Depends(get_db)):
    """Get all games, each with the name of its category."""
    games = game_repo.get_all_games(db)
    return [Game.model_validate(game) for game in games]


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
def create_new_game(game_data: GameCreate, db: Session = Depends(get_db)):
    """
    Create a new game. The category must exist.
    """
    game = create_game(
        db,
        name=game_data.name,
        image=game_data.image,
        stock_total=game_data.stock_total,
        category_id=game_data.category_id,
        price_per_day=game_data.price_per_day,
    )
    return Game.model_validate(game)
