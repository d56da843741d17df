# =========================================================
# SALE COMPOSITION
#
# Adding, changing or removing a sold-item line always:
# - keeps the item's status in step with whether any line references it
# - re-derives Sale.total_amount from the full line set
# inside a single transaction.
# =========================================================

import logging
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from estate_sales.core.errors import NotFoundError, ValidationError
from estate_sales.database import atomic
from estate_sales.models.items import Item
from estate_sales.models.sales import Sale
from estate_sales.models.sold_items import SoldItem

logger = logging.getLogger(__name__)

SOLD = "Sold"
AVAILABLE = "Available"

CENTS = Decimal("0.01")


def recompute_sale_total(db: Session, sale_id: int) -> Decimal:
    """Persist and return the sum of unit_price * quantity over the sale's lines.

    Pending ORM changes must be flushed first; the sum is computed in SQL.
    """
    total = (
        db.query(func.coalesce(func.sum(SoldItem.unit_price * SoldItem.quantity), 0))
        .filter(SoldItem.sale_id == sale_id)
        .scalar()
    )
    total = Decimal(str(total or 0)).quantize(CENTS)

    db.query(Sale).filter(Sale.id == sale_id).update(
        {Sale.total_amount: total},
        synchronize_session=False,
    )
    return total


def is_item_referenced(db: Session, item_id: int) -> bool:
    return (
        db.query(SoldItem.item_id)
        .filter(SoldItem.item_id == item_id)
        .first()
        is not None
    )


def release_items(db: Session, item_ids) -> int:
    """Return Sold items with no remaining lines to Available; count them."""
    released = 0

    for item_id in set(item_ids):
        if is_item_referenced(db, item_id):
            continue

        released += (
            db.query(Item)
            .filter(Item.id == item_id, Item.status == SOLD)
            .update({Item.status: AVAILABLE}, synchronize_session=False)
        )

    return released


def add_line(
    db: Session,
    sale_id: int,
    item_id: int,
    unit_price: Decimal,
    quantity: int,
) -> Decimal:
    sale = db.query(Sale).filter(Sale.id == sale_id).first()
    if not sale:
        raise ValidationError("Sale not found")

    item = (
        db.query(Item)
        .filter(Item.id == item_id)
        .with_for_update()
        .first()
    )
    if not item:
        raise ValidationError("Item not found")

    if item.status == SOLD:
        raise ValidationError("Item is already sold")

    duplicate = (
        db.query(SoldItem)
        .filter(SoldItem.sale_id == sale_id, SoldItem.item_id == item_id)
        .first()
    )
    if duplicate:
        raise ValidationError("Item is already in this sale")

    with atomic(db):
        db.add(
            SoldItem(
                sale_id=sale_id,
                item_id=item_id,
                unit_price=unit_price,
                quantity=quantity,
            )
        )
        item.status = SOLD
        db.flush()

        total = recompute_sale_total(db, sale_id)

    logger.info(f"Item {item_id} added to sale {sale_id}, total now {total}")
    return total


def update_line(
    db: Session,
    sale_id: int,
    item_id: int,
    unit_price: Decimal,
    quantity: int,
) -> Decimal:
    line = (
        db.query(SoldItem)
        .filter(SoldItem.sale_id == sale_id, SoldItem.item_id == item_id)
        .first()
    )
    if not line:
        raise NotFoundError("Sold item record not found")

    with atomic(db):
        line.unit_price = unit_price
        line.quantity = quantity
        db.flush()

        total = recompute_sale_total(db, sale_id)

    logger.info(f"Sold item record updated for sale {sale_id}, item {item_id}")
    return total


def remove_line(db: Session, sale_id: int, item_id: int) -> bool:
    """Delete one line; return True when the item went back to Available."""
    line = (
        db.query(SoldItem)
        .filter(SoldItem.sale_id == sale_id, SoldItem.item_id == item_id)
        .first()
    )
    if not line:
        raise NotFoundError("Sold item record not found")

    with atomic(db):
        db.delete(line)
        db.flush()

        released = release_items(db, [item_id])
        recompute_sale_total(db, sale_id)

    logger.info(f"Item {item_id} removed from sale {sale_id}")
    return released > 0
