# =========================================================
# CASCADING DELETES
#
# Each delete removes its dependents explicitly and reports what went
# with it, instead of leaning on ON DELETE CASCADE alone:
# - event    -> its items (and any sale lines for them)
# - customer -> its sales -> their lines, items back to Available
# - sale     -> its lines, items back to Available
# - item     -> refused while any line references it
# =========================================================

import logging

from sqlalchemy.orm import Session

from estate_sales.core.errors import ConflictError, NotFoundError
from estate_sales.core.sale_lines import SOLD, is_item_referenced, recompute_sale_total, release_items
from estate_sales.database import atomic
from estate_sales.models.customers import Customer
from estate_sales.models.events import EstateSaleEvent
from estate_sales.models.items import Item
from estate_sales.models.sales import Sale
from estate_sales.models.sold_items import SoldItem

logger = logging.getLogger(__name__)


def delete_event(db: Session, event_id: int) -> int:
    """Delete an event and its items; return the number of items removed."""
    event = db.query(EstateSaleEvent).filter(EstateSaleEvent.id == event_id).first()
    if not event:
        raise NotFoundError("Event not found")

    item_ids = [row.id for row in db.query(Item.id).filter(Item.event_id == event_id).all()]

    if item_ids:
        logger.info(
            f'Deleting event "{event.title}" will also delete {len(item_ids)} associated items'
        )

    with atomic(db):
        affected_sales = [
            row.sale_id
            for row in (
                db.query(SoldItem.sale_id)
                .filter(SoldItem.item_id.in_(item_ids))
                .distinct()
                .all()
            )
        ]

        db.query(SoldItem).filter(SoldItem.item_id.in_(item_ids)).delete(synchronize_session=False)
        db.query(Item).filter(Item.event_id == event_id).delete(synchronize_session=False)
        db.query(EstateSaleEvent).filter(EstateSaleEvent.id == event_id).delete(synchronize_session=False)
        db.flush()

        for sale_id in affected_sales:
            recompute_sale_total(db, sale_id)

    logger.info(f"Event {event_id} deleted with {len(item_ids)} items")
    return len(item_ids)


def delete_sale(db: Session, sale_id: int) -> int:
    """Delete a sale and its lines; return how many items went back to Available."""
    sale = db.query(Sale).filter(Sale.id == sale_id).first()
    if not sale:
        raise NotFoundError("Sale not found")

    item_ids = [
        row.item_id
        for row in db.query(SoldItem.item_id).filter(SoldItem.sale_id == sale_id).all()
    ]

    with atomic(db):
        db.query(SoldItem).filter(SoldItem.sale_id == sale_id).delete(synchronize_session=False)
        db.query(Sale).filter(Sale.id == sale_id).delete(synchronize_session=False)
        db.flush()

        released = release_items(db, item_ids)

    logger.info(f"Sale {sale_id} deleted, {released} items returned to Available")
    return released


def delete_customer(db: Session, customer_id: int) -> int:
    """Delete a customer with its sales and their lines; return the sale count."""
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise NotFoundError("Customer not found")

    sale_ids = [row.id for row in db.query(Sale.id).filter(Sale.customer_id == customer_id).all()]

    if sale_ids:
        logger.info(
            f'Deleting customer "{customer.first_name} {customer.last_name}" '
            f"will also delete {len(sale_ids)} associated sales"
        )

    with atomic(db):
        item_ids = [
            row.item_id
            for row in db.query(SoldItem.item_id).filter(SoldItem.sale_id.in_(sale_ids)).all()
        ]

        db.query(SoldItem).filter(SoldItem.sale_id.in_(sale_ids)).delete(synchronize_session=False)
        db.query(Sale).filter(Sale.customer_id == customer_id).delete(synchronize_session=False)
        db.query(Customer).filter(Customer.id == customer_id).delete(synchronize_session=False)
        db.flush()

        release_items(db, item_ids)

    logger.info(f"Customer {customer_id} deleted with {len(sale_ids)} sales")
    return len(sale_ids)


def delete_item(db: Session, item_id: int) -> None:
    item = db.query(Item).filter(Item.id == item_id).first()
    if not item:
        raise NotFoundError("Item not found")

    if item.status == SOLD or is_item_referenced(db, item_id):
        raise ConflictError(
            "Cannot delete item that has been sold. Please remove from sales first."
        )

    item_name = item.name

    with atomic(db):
        db.query(Item).filter(Item.id == item_id).delete(synchronize_session=False)

    logger.info(f'Item "{item_name}" deleted')

