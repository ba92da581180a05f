from datetime import date

from sqlalchemy.orm import Session

from app.db.models.customer import Customer as CustomerModel
from app.errors import NotFoundError


def get_customer_by_id(db: Session, customer_id: int) -> CustomerModel | None:
    """Get a customer by ID."""
    return db.query(CustomerModel).filter(CustomerModel.id == customer_id).first()


def get_all_customers(db: Session) -> list[CustomerModel]:
    """Get all customers."""
    return db.query(CustomerModel).order_by(CustomerModel.id).all()


def get_customer_by_cpf(
    db: Session, cpf: str, exclude_id: int | None = None
) -> CustomerModel | None:
    """Get a customer by CPF, optionally ignoring one customer (the one being updated)."""
    query = db.query(CustomerModel).filter(CustomerModel.cpf == cpf)
    if exclude_id is not None:
        query = query.filter(CustomerModel.id != exclude_id)
    return query.first()


def create_customer(
    db: Session,
    name: str,
    phone: str,
    cpf: str,
    birthday: date,
) -> CustomerModel:
    """Create a new customer in the database. Pure data access - no business logic."""
    db_customer = CustomerModel(name=name, phone=phone, cpf=cpf, birthday=birthday)
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    return db_customer


def update_customer(
    db: Session,
    customer_id: int,
    name: str,
    phone: str,
    cpf: str,
    birthday: date,
) -> CustomerModel:
    """Replace every field of a customer."""
    customer = get_customer_by_id(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")

    customer.name = name
    customer.phone = phone
    customer.cpf = cpf
    customer.birthday = birthday

    db.commit()
    db.refresh(customer)
    return customer


class SqlCustomerDirectory:
    """Customer reader backed by the customers table."""

    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: int) -> CustomerModel | None:
        return get_customer_by_id(self.db, customer_id)
