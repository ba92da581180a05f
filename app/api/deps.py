from collections.abc import Callable
from datetime import date

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import SessionLocal
from app.repositories.customer import SqlCustomerDirectory
from app.repositories.game import SqlGameCatalog
from app.repositories.rental import SqlRentalLedger
from app.services.rental import RentalLifecycleService


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_today() -> Callable[[], date]:
    """Clock used for rent and return dates. Overridden in tests."""
    return date.today


def get_rental_service(
    db: Session = Depends(get_db),
    today: Callable[[], date] = Depends(get_today),
) -> RentalLifecycleService:
    return RentalLifecycleService(
        catalog=SqlGameCatalog(db),
        customers=SqlCustomerDirectory(db),
        ledger=SqlRentalLedger(db),
        today=today,
    )
