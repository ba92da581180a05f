import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from app.domain.ports import CustomerDirectory, GameCatalog, RentalLedger
from app.domain.rental_pricing import RentalReturnPolicy
from app.errors import (
    CapacityExceededError,
    DomainValidationError,
    NotFoundError,
    ReferentialError,
    RentalAlreadyClosedError,
    RentalStillOpenError,
)

logger = logging.getLogger(__name__)


class RentalLifecycleService:
    """
    Creates, closes and cancels rentals.

    The catalog, customer directory and ledger are injected; see
    app.domain.ports for what each must provide. today is the clock used
    for rent and return dates.
    """

    def __init__(
        self,
        catalog: GameCatalog,
        customers: CustomerDirectory,
        ledger: RentalLedger,
        today: Callable[[], date] = date.today,
    ):
        self.catalog = catalog
        self.customers = customers
        self.ledger = ledger
        self.today = today

    def list_rentals(
        self, customer_id: int | None = None, game_id: int | None = None
    ) -> list[Any]:
        return self.ledger.list_all(customer_id=customer_id, game_id=game_id)

    def create_rental(self, customer_id: int, game_id: int, days_rented: int) -> Any:
        """
        Rent one unit of a game to a customer.

        - Validates days_rented is a positive integer
        - Validates game and customer exist
        - Validates the game still has a unit available
        - Freezes original_price = price_per_day * days_rented

        Raises:
            DomainValidationError: If days_rented is not positive
            ReferentialError: If the game or the customer does not exist
            CapacityExceededError: If every unit of the game is already rented
        """
        if isinstance(days_rented, bool) or not isinstance(days_rented, int) or days_rented <= 0:
            raise DomainValidationError("daysRented must be a positive integer")

        game = self.catalog.get_game(game_id)
        if not game:
            raise ReferentialError(f"Game with id {game_id} not found")

        customer = self.customers.get_customer(customer_id)
        if not customer:
            raise ReferentialError(f"Customer with id {customer_id} not found")

        if self.ledger.count_open(game_id) >= game.stock_total:
            logger.warning("No stock left for game %s", game_id)
            raise CapacityExceededError(f"Game {game_id} has no units available")

        original_price = RentalReturnPolicy.original_price(
            price_per_day=game.price_per_day, days_rented=days_rented
        )

        # The ledger re-checks availability atomically with the insert
        rental = self.ledger.open_rental(
            customer_id=customer_id,
            game_id=game_id,
            rent_date=self.today(),
            days_rented=days_rented,
            original_price=original_price,
        )
        logger.info(
            "Rental %s created: customer %s, game %s, %s days",
            rental.id,
            customer_id,
            game_id,
            days_rented,
        )
        return rental

    def return_rental(self, rental_id: int) -> Any:
        """
        Close a rental, recording today as the return date and charging any delay.

        Raises:
            NotFoundError: If the rental does not exist
            RentalAlreadyClosedError: If the rental was already returned
        """
        rental = self.ledger.get(rental_id)
        if not rental:
            raise NotFoundError("Rental not found")

        if rental.return_date is not None:
            raise RentalAlreadyClosedError(f"Rental {rental_id} is already closed")

        policy = RentalReturnPolicy(as_of=self.today())
        delay_fee = policy.delay_fee(
            rent_date=rental.rent_date,
            days_rented=rental.days_rented,
            original_price=rental.original_price,
        )

        closed = self.ledger.close(rental_id, return_date=policy.as_of, delay_fee=delay_fee)
        logger.info("Rental %s returned on %s, delay fee %s", rental_id, policy.as_of, delay_fee)
        return closed

    def cancel_rental(self, rental_id: int) -> None:
        """
        Delete a rental. Only returned rentals can be deleted.

        Raises:
            NotFoundError: If the rental does not exist
            RentalStillOpenError: If the rental has not been returned yet
        """
        rental = self.ledger.get(rental_id)
        if not rental:
            raise NotFoundError("Rental not found")

        if rental.return_date is None:
            raise RentalStillOpenError(f"Rental {rental_id} has not been returned yet")

        self.ledger.delete(rental_id)
        logger.info("Rental %s deleted", rental_id)
