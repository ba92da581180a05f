from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Game(Base):
    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint("stock_total >= 1", name="ck_games_stock_total_positive"),
        CheckConstraint("price_per_day >= 1", name="ck_games_price_per_day_positive"),
        CheckConstraint(
            "open_rentals >= 0 AND open_rentals <= stock_total",
            name="ck_games_open_rentals_within_stock",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    image = Column(String, nullable=False)
    stock_total = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    price_per_day = Column(Integer, nullable=False)
    # Number of rentals of this game with no return date yet
    open_rentals = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    category = relationship("Category", backref="games")

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category is not None else None
