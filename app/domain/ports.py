"""Store-access contracts consumed by the rental lifecycle service.

The SQLAlchemy implementations live in app.repositories; tests substitute
in-memory ones.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Protocol


class GameCatalog(Protocol):
    def get_game(self, game_id: int) -> Any | None:
        """Return a game exposing price_per_day and stock_total, or None."""
        ...


class CustomerDirectory(Protocol):
    def get_customer(self, customer_id: int) -> Any | None: ...


class RentalLedger(Protocol):
    def get(self, rental_id: int) -> Any | None: ...

    def list_all(
        self, customer_id: int | None = None, game_id: int | None = None
    ) -> list[Any]: ...

    def count_open(self, game_id: int) -> int: ...

    def open_rental(
        self,
        *,
        customer_id: int,
        game_id: int,
        rent_date: date,
        days_rented: int,
        original_price: int,
    ) -> Any:
        """
        Take one unit of the game and insert an open rental, atomically.

        Raises CapacityExceededError if no unit is left at write time.
        """
        ...

    def close(self, rental_id: int, *, return_date: date, delay_fee: int | None) -> Any:
        """
        Set return_date and delay_fee on an open rental and release its unit.

        Raises RentalAlreadyClosedError if the rental was closed concurrently,
        or NotFoundError if it was deleted concurrently.
        """
        ...

    def delete(self, rental_id: int) -> None:
        """
        Delete a closed rental.

        Raises RentalStillOpenError if it is open, or NotFoundError if it is gone.
        """
        ...
