from app.db.models.category import Category
from app.db.models.game import Game
from app.db.models.customer import Customer
from app.db.models.rental import Rental

__all__ = ["Category", "Game", "Customer", "Rental"]
