"""Concurrent rentals of the last unit against a real database file.

Each worker uses its own session, as concurrent requests would.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from app.db.models.game import Game as GameModel
from app.db.models.rental import Rental as RentalModel
from app.errors import CapacityExceededError, NotFoundError, RentalStillOpenError
from app.repositories.customer import SqlCustomerDirectory
from app.repositories.game import SqlGameCatalog
from app.repositories.rental import SqlRentalLedger
from app.services.rental import RentalLifecycleService

WORKERS = 8


def _rent_in_own_session(session_factory, customer_id, game_id):
    db = session_factory()
    try:
        service = RentalLifecycleService(
            catalog=SqlGameCatalog(db),
            customers=SqlCustomerDirectory(db),
            ledger=SqlRentalLedger(db),
        )
        service.create_rental(customer_id=customer_id, game_id=game_id, days_rented=2)
        return "ok"
    except CapacityExceededError:
        return "full"
    finally:
        db.close()


def test_only_one_concurrent_rental_gets_the_last_unit(
    db, session_factory, customer, single_unit_game
):
    customer_id = customer.id
    game_id = single_unit_game.id

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        futures = [
            pool.submit(_rent_in_own_session, session_factory, customer_id, game_id)
            for _ in range(WORKERS)
        ]
        results = [future.result() for future in futures]

    assert results.count("ok") == 1
    assert results.count("full") == WORKERS - 1

    db.expire_all()
    open_rentals = (
        db.query(RentalModel)
        .filter(RentalModel.game_id == game_id, RentalModel.return_date.is_(None))
        .count()
    )
    assert open_rentals == 1
    assert db.query(GameModel).filter(GameModel.id == game_id).one().open_rentals == 1


def test_ledger_refuses_insert_when_counter_is_full(db, customer, single_unit_game):
    """The conditional counter update alone is enough to stop an oversell."""
    ledger = SqlRentalLedger(db)
    fields = dict(
        customer_id=customer.id,
        game_id=single_unit_game.id,
        rent_date=date(2025, 3, 10),
        days_rented=1,
        original_price=10,
    )
    ledger.open_rental(**fields)

    with pytest.raises(CapacityExceededError):
        ledger.open_rental(**fields)

    assert db.query(RentalModel).count() == 1


def _closed_rental(db, customer, game):
    ledger = SqlRentalLedger(db)
    rental = ledger.open_rental(
        customer_id=customer.id,
        game_id=game.id,
        rent_date=date(2025, 3, 10),
        days_rented=1,
        original_price=10,
    )
    return ledger.close(rental.id, return_date=date(2025, 3, 11), delay_fee=None)


def test_delete_of_row_removed_by_another_session(
    db, session_factory, customer, single_unit_game
):
    rental_id = _closed_rental(db, customer, single_unit_game).id

    other = session_factory()
    try:
        SqlRentalLedger(other).delete(rental_id)
    finally:
        other.close()

    with pytest.raises(NotFoundError):
        SqlRentalLedger(db).delete(rental_id)


def test_close_of_missing_rental(db):
    with pytest.raises(NotFoundError):
        SqlRentalLedger(db).close(9999, return_date=date(2025, 3, 11), delay_fee=None)


def test_delete_of_open_rental_is_still_a_state_error(db, customer, single_unit_game):
    ledger = SqlRentalLedger(db)
    rental = ledger.open_rental(
        customer_id=customer.id,
        game_id=single_unit_game.id,
        rent_date=date(2025, 3, 10),
        days_rented=1,
        original_price=10,
    )
    with pytest.raises(RentalStillOpenError):
        ledger.delete(rental.id)


def test_large_delay_fee_is_stored(db, customer, single_unit_game):
    ledger = SqlRentalLedger(db)
    rental = ledger.open_rental(
        customer_id=customer.id,
        game_id=single_unit_game.id,
        rent_date=date(2000, 1, 1),
        days_rented=365,
        original_price=365_000_000,
    )
    closed = ledger.close(rental.id, return_date=date(2025, 1, 1), delay_fee=9_000_000_000)
    assert closed.delay_fee == 9_000_000_000
