# estate_sales/routers/items.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.core.cascades import delete_item as cascade_delete_item
from estate_sales.core.errors import ConflictError, NotFoundError, ValidationError
from estate_sales.core.sale_lines import SOLD, is_item_referenced
from estate_sales.database import get_db
from estate_sales.models.events import EstateSaleEvent
from estate_sales.models.items import Item
from estate_sales.schemas.common import MessageResponse
from estate_sales.schemas.item import (
    AvailableItemResponse,
    ItemCreate,
    ItemCreatedResponse,
    ItemResponse,
    ItemUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/items",
    tags=["Items"],
)


def _ensure_event_exists(db: Session, event_id: int):
    if not db.query(EstateSaleEvent.id).filter(EstateSaleEvent.id == event_id).first():
        raise ValidationError("Event not found")


@router.get("", response_model=list[ItemResponse])
def list_items(db: Session = Depends(get_db)):
    items = queries.list_items(db)
    logger.info(f"Items query: Found {len(items)} items")
    return items


@router.get("/available", response_model=list[AvailableItemResponse])
def list_available_items(db: Session = Depends(get_db)):
    return queries.available_items(db)


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, db: Session = Depends(get_db)):
    item = queries.get_item(db, item_id)

    if not item:
        raise NotFoundError("Item not found")

    return item


@router.post("", response_model=ItemCreatedResponse)
def create_item(item_data: ItemCreate, db: Session = Depends(get_db)):
    # Items only become Sold by being added to a sale
    if item_data.status == SOLD:
        raise ValidationError("New items cannot be marked Sold. Add the item to a sale instead.")

    _ensure_event_exists(db, item_data.event_id)

    item = Item(**item_data.model_dump())

    db.add(item)
    db.commit()
    db.refresh(item)

    logger.info(f"Item created with ID: {item.id}")

    return ItemCreatedResponse(
        item_id=item.id,
        message="Item created successfully",
    )


@router.put("/{item_id}", response_model=MessageResponse)
def update_item(
    item_id: int,
    item_data: ItemUpdate,
    db: Session = Depends(get_db),
):
    item = db.query(Item).filter(Item.id == item_id).first()

    if not item:
        raise NotFoundError("Item not found")

    _ensure_event_exists(db, item_data.event_id)

    new_status = item_data.status or item.status
    referenced = is_item_referenced(db, item_id)

    if referenced and new_status != SOLD:
        raise ConflictError("Item has been sold. Remove it from its sale before changing its status.")

    if not referenced and new_status == SOLD:
        raise ValidationError("Items are marked Sold by adding them to a sale")

    item.event_id = item_data.event_id
    item.name = item_data.name
    item.category = item_data.category
    item.description = item_data.description
    item.starting_price = item_data.starting_price
    item.status = new_status

    db.commit()

    logger.info(f"Item {item_id} updated successfully")
    return MessageResponse(message="Item updated successfully")


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    logger.info(f"DELETE request received for item ID: {item_id}")

    cascade_delete_item(db, item_id)

    return MessageResponse(message="Item deleted successfully")
