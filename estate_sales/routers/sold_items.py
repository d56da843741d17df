# estate_sales/routers/sold_items.py

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.core import sale_lines
from estate_sales.core.errors import NotFoundError
from estate_sales.core.rate_limiter import limiter
from estate_sales.database import get_db
from estate_sales.schemas.common import MessageResponse
from estate_sales.schemas.sold_item import (
    SoldItemCreate,
    SoldItemResponse,
    SoldItemUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/solditems",
    tags=["Sold Items"],
)


@router.get("", response_model=list[SoldItemResponse])
def list_sold_items(db: Session = Depends(get_db)):
    sold_items = queries.list_sold_items(db)
    logger.info(f"Sold items query: Found {len(sold_items)} sold items")
    return sold_items


@router.get("/{sale_id}/{item_id}", response_model=SoldItemResponse)
def get_sold_item(sale_id: int, item_id: int, db: Session = Depends(get_db)):
    sold_item = queries.get_sold_item(db, sale_id, item_id)

    if not sold_item:
        raise NotFoundError("Sold item record not found")

    return sold_item


@router.post("", response_model=MessageResponse)
@limiter.limit("30/minute")
def add_item_to_sale(
    request: Request,
    line_data: SoldItemCreate,
    db: Session = Depends(get_db),
):
    sale_lines.add_line(
        db,
        sale_id=line_data.sale_id,
        item_id=line_data.item_id,
        unit_price=line_data.unit_price,
        quantity=line_data.quantity,
    )

    return MessageResponse(message="Item added to sale successfully")


@router.put("/{sale_id}/{item_id}", response_model=MessageResponse)
def update_sold_item(
    sale_id: int,
    item_id: int,
    line_data: SoldItemUpdate,
    db: Session = Depends(get_db),
):
    sale_lines.update_line(
        db,
        sale_id=sale_id,
        item_id=item_id,
        unit_price=line_data.unit_price,
        quantity=line_data.quantity,
    )

    return MessageResponse(message="Sold item updated successfully")


@router.delete("/{sale_id}/{item_id}", response_model=MessageResponse)
def remove_item_from_sale(sale_id: int, item_id: int, db: Session = Depends(get_db)):
    sale_lines.remove_line(db, sale_id, item_id)

    return MessageResponse(message="Item removed from sale successfully")
