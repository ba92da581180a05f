import logging
from datetime import date

from sqlalchemy import delete, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.db.models.game import Game as GameModel
from app.db.models.rental import Rental as RentalModel
from app.errors import (
    CapacityExceededError,
    NotFoundError,
    RentalAlreadyClosedError,
    RentalStillOpenError,
    StorageError,
)

logger = logging.getLogger(__name__)


def get_rental_by_id(db: Session, rental_id: int) -> RentalModel | None:
    """Get a rental by ID."""
    return db.query(RentalModel).filter(RentalModel.id == rental_id).first()


def get_all_rentals(
    db: Session,
    customer_id: int | None = None,
    game_id: int | None = None,
) -> list[RentalModel]:
    """Get all rentals with customer and game loaded, optionally filtered by customer or game."""
    query = db.query(RentalModel).options(
        joinedload(RentalModel.customer),
        joinedload(RentalModel.game),
    )

    if customer_id is not None:
        query = query.filter(RentalModel.customer_id == customer_id)

    if game_id is not None:
        query = query.filter(RentalModel.game_id == game_id)

    return query.order_by(RentalModel.id).all()


def count_open_rentals(db: Session, game_id: int) -> int:
    """Count rentals of a game that have not been returned yet."""
    return (
        db.query(func.count(RentalModel.id))
        .filter(RentalModel.game_id == game_id, RentalModel.return_date.is_(None))
        .scalar()
    )


class SqlRentalLedger:
    """
    Rental store backed by the rentals table.

    Every write method commits exactly once or rolls back. The per-game
    availability counter (games.open_rentals) is moved in the same
    transaction as the rental row, with a conditional UPDATE, so two
    concurrent rentals can never take the same last unit.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, rental_id: int) -> RentalModel | None:
        return get_rental_by_id(self.db, rental_id)

    def list_all(
        self, customer_id: int | None = None, game_id: int | None = None
    ) -> list[RentalModel]:
        return get_all_rentals(self.db, customer_id=customer_id, game_id=game_id)

    def count_open(self, game_id: int) -> int:
        return count_open_rentals(self.db, game_id)

    def open_rental(
        self,
        *,
        customer_id: int,
        game_id: int,
        rent_date: date,
        days_rented: int,
        original_price: int,
    ) -> RentalModel:
        try:
            reserved = self.db.execute(
                update(GameModel)
                .where(
                    GameModel.id == game_id,
                    GameModel.open_rentals < GameModel.stock_total,
                )
                .values(open_rentals=GameModel.open_rentals + 1)
                .execution_options(synchronize_session=False)
            )
            if reserved.rowcount != 1:
                self.db.rollback()
                raise CapacityExceededError(f"Game {game_id} has no units available")

            rental = RentalModel(
                customer_id=customer_id,
                game_id=game_id,
                rent_date=rent_date,
                days_rented=days_rented,
                original_price=original_price,
                return_date=None,
                delay_fee=None,
            )
            self.db.add(rental)
            self.db.commit()
            self.db.refresh(rental)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to insert rental for game %s", game_id)
            raise StorageError("Could not save the rental") from exc
        return rental

    def close(
        self, rental_id: int, *, return_date: date, delay_fee: int | None
    ) -> RentalModel:
        try:
            rental = self.get(rental_id)
            game_id = rental.game_id if rental is not None else None

            closed = self.db.execute(
                update(RentalModel)
                .where(RentalModel.id == rental_id, RentalModel.return_date.is_(None))
                .values(return_date=return_date, delay_fee=delay_fee)
                .execution_options(synchronize_session=False)
            )
            if closed.rowcount != 1:
                self.db.rollback()
                if self.get(rental_id) is None:
                    raise NotFoundError("Rental not found")
                raise RentalAlreadyClosedError(f"Rental {rental_id} is already closed")

            self.db.execute(
                update(GameModel)
                .where(GameModel.id == game_id, GameModel.open_rentals > 0)
                .values(open_rentals=GameModel.open_rentals - 1)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
            rental = self.get(rental_id)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to close rental %s", rental_id)
            raise StorageError("Could not update the rental") from exc
        return rental

    def delete(self, rental_id: int) -> None:
        try:
            deleted = self.db.execute(
                delete(RentalModel)
                .where(RentalModel.id == rental_id, RentalModel.return_date.isnot(None))
                .execution_options(synchronize_session=False)
            )
            if deleted.rowcount != 1:
                self.db.rollback()
                if self.get(rental_id) is None:
                    raise NotFoundError("Rental not found")
                raise RentalStillOpenError(f"Rental {rental_id} has not been returned yet")
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete rental %s", rental_id)
            raise StorageError("Could not delete the rental") from exc
