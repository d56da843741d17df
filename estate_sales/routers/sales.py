# estate_sales/routers/sales.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.core.cascades import delete_sale as cascade_delete_sale
from estate_sales.core.errors import NotFoundError, ValidationError
from estate_sales.database import get_db
from estate_sales.models.customers import Customer
from estate_sales.models.sales import Sale
from estate_sales.schemas.common import MessageResponse
from estate_sales.schemas.sale import (
    SaleCreate,
    SaleCreatedResponse,
    SaleResponse,
    SaleUpdate,
)
from estate_sales.schemas.sold_item import SaleLineResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/sales",
    tags=["Sales"],
)


def _ensure_customer_exists(db: Session, customer_id: int):
    if not db.query(Customer.id).filter(Customer.id == customer_id).first():
        raise ValidationError("Customer not found")


@router.get("", response_model=list[SaleResponse])
def list_sales(db: Session = Depends(get_db)):
    sales = queries.list_sales(db)
    logger.info(f"Sales query: Found {len(sales)} sales")
    return sales


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(sale_id: int, db: Session = Depends(get_db)):
    sale = queries.get_sale(db, sale_id)

    if not sale:
        raise NotFoundError("Sale not found")

    return sale


@router.get("/{sale_id}/items", response_model=list[SaleLineResponse])
def get_sale_lines(sale_id: int, db: Session = Depends(get_db)):
    if not db.query(Sale.id).filter(Sale.id == sale_id).first():
        raise NotFoundError("Sale not found")

    return queries.sale_lines(db, sale_id)


# totalAmount given here is stored as-is; the next line-item change
# replaces it with the sum of the sale's lines.
@router.post("", response_model=SaleCreatedResponse)
def create_sale(sale_data: SaleCreate, db: Session = Depends(get_db)):
    _ensure_customer_exists(db, sale_data.customer_id)

    sale = Sale(**sale_data.model_dump())

    db.add(sale)
    db.commit()
    db.refresh(sale)

    logger.info(f"Sale created with ID: {sale.id}")

    return SaleCreatedResponse(
        sale_id=sale.id,
        message="Sale created successfully",
    )


@router.put("/{sale_id}", response_model=MessageResponse)
def update_sale(
    sale_id: int,
    sale_data: SaleUpdate,
    db: Session = Depends(get_db),
):
    sale = db.query(Sale).filter(Sale.id == sale_id).first()

    if not sale:
        raise NotFoundError("Sale not found")

    _ensure_customer_exists(db, sale_data.customer_id)

    for field, value in sale_data.model_dump(exclude_none=True).items():
        setattr(sale, field, value)

    db.commit()

    logger.info(f"Sale {sale_id} updated successfully")
    return MessageResponse(message="Sale updated successfully")


@router.delete("/{sale_id}", response_model=MessageResponse)
def delete_sale(sale_id: int, db: Session = Depends(get_db)):
    returned = cascade_delete_sale(db, sale_id)

    message = "Sale deleted successfully"
    if returned > 0:
        message += f" ({returned} items returned to Available status)"

    return MessageResponse(message=message)
