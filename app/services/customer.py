from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import app.repositories.customer as customer_repo
from app.db.models.customer import Customer as CustomerModel
from app.errors import DuplicateResourceError, NotFoundError
from app.schemas.customer import CustomerCreate, CustomerUpdate


def create_customer(db: Session, customer_data: CustomerCreate) -> CustomerModel:
    """
    Create a new customer with business logic validation.

    - Validates CPF uniqueness

    Raises:
        DuplicateResourceError: If the CPF is already registered
    """
    if customer_repo.get_customer_by_cpf(db, customer_data.cpf):
        raise DuplicateResourceError("CPF already registered")

    try:
        return customer_repo.create_customer(
            db,
            name=customer_data.name,
            phone=customer_data.phone,
            cpf=customer_data.cpf,
            birthday=customer_data.birthday,
        )
    except IntegrityError as exc:
        # Lost a race against another insert with the same CPF
        db.rollback()
        raise DuplicateResourceError("CPF already registered") from exc


def update_customer(
    db: Session, customer_id: int, customer_data: CustomerUpdate
) -> CustomerModel:
    """
    Replace a customer's data.

    Keeping the customer's own CPF is not a conflict.

    Raises:
        NotFoundError: If customer doesn't exist
        DuplicateResourceError: If the CPF belongs to another customer
    """
    customer = customer_repo.get_customer_by_id(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")

    if customer_repo.get_customer_by_cpf(db, customer_data.cpf, exclude_id=customer_id):
        raise DuplicateResourceError("CPF already registered")

    try:
        return customer_repo.update_customer(
            db,
            customer_id=customer_id,
            name=customer_data.name,
            phone=customer_data.phone,
            cpf=customer_data.cpf,
            birthday=customer_data.birthday,
        )
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResourceError("CPF already registered") from exc
