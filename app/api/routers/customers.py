from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.customer as customer_repo
from app.services.customer import create_customer, update_customer
from app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from app.errors import NotFoundError

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
def get_all_customers(db: Session = Depends(get_db)):
    """Get all customers."""
    customers = customer_repo.get_all_customers(db)
    return [Customer.model_validate(customer) for customer in customers]


@router.get("/{customer_id}", response_model=Customer)
def get_customer_by_id(customer_id: int, db: Session = Depends(get_db)):
    """Get a customer by ID."""
    customer = customer_repo.get_customer_by_id(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return Customer.model_validate(customer)


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_new_customer(customer_data: CustomerCreate, db: Session = Depends(get_db)):
    """
    Register a new customer. CPF must not be registered yet.
    """
    customer = create_customer(db, customer_data)
    return Customer.model_validate(customer)


@router.put("/{customer_id}", response_model=Customer, status_code=status.HTTP_201_CREATED)
def update_customer_by_id(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
):
    """
    Replace a customer's data. Every field is required.
    """
    customer = update_customer(db, customer_id=customer_id, customer_data=customer_data)
    return Customer.model_validate(customer)
