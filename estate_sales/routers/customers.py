# estate_sales/routers/customers.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.core.cascades import delete_customer as cascade_delete_customer
from estate_sales.core.errors import ConflictError, NotFoundError
from estate_sales.database import get_db
from estate_sales.models.customers import Customer
from estate_sales.schemas.common import MessageResponse
from estate_sales.schemas.customer import (
    CustomerCreate,
    CustomerCreatedResponse,
    CustomerDropdownResponse,
    CustomerResponse,
    CustomerUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/customers",
    tags=["Customers"],
)

DUPLICATE_EMAIL = "Email address already exists"


def _ensure_email_free(db: Session, email: str, customer_id: int | None = None):
    query = db.query(Customer.id).filter(Customer.email == email)
    if customer_id is not None:
        query = query.filter(Customer.id != customer_id)

    if query.first():
        raise ConflictError(DUPLICATE_EMAIL)


def _commit_customer(db: Session):
    # The unique index still guards against a concurrent insert of the same email
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_EMAIL)


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    customers = queries.list_customers(db)
    logger.info(f"Customers query: Found {len(customers)} customers")
    return customers


@router.get("/dropdown", response_model=list[CustomerDropdownResponse])
def customers_dropdown(db: Session = Depends(get_db)):
    return queries.customer_dropdown(db)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = queries.get_customer(db, customer_id)

    if not customer:
        raise NotFoundError("Customer not found")

    return customer


@router.post("", response_model=CustomerCreatedResponse)
def create_customer(customer_data: CustomerCreate, db: Session = Depends(get_db)):
    _ensure_email_free(db, customer_data.email)

    customer = Customer(**customer_data.model_dump())

    db.add(customer)
    _commit_customer(db)
    db.refresh(customer)

    logger.info(f"Customer created with ID: {customer.id}")

    return CustomerCreatedResponse(
        customer_id=customer.id,
        message="Customer created successfully",
    )


@router.put("/{customer_id}", response_model=MessageResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
):
    customer = db.query(Customer).filter(Customer.id == customer_id).first()

    if not customer:
        raise NotFoundError("Customer not found")

    _ensure_email_free(db, customer_data.email, customer_id)

    for field, value in customer_data.model_dump().items():
        setattr(customer, field, value)

    _commit_customer(db)

    logger.info(f"Customer {customer_id} updated successfully")
    return MessageResponse(message="Customer updated successfully")


@router.delete("/{customer_id}", response_model=MessageResponse)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    sale_count = cascade_delete_customer(db, customer_id)

    message = "Customer deleted successfully"
    if sale_count > 0:
        message += f" ({sale_count} associated sales also removed)"

    return MessageResponse(message=message)
