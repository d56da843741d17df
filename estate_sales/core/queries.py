# estate_sales/core/queries.py
"""Read-side queries shared by the routers and the workbook exports.

Every query labels its columns with the API field names (snake_case) and
returns plain dicts, so routers can hand them straight to response models.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from estate_sales.models.customers import Customer
from estate_sales.models.events import EstateSaleEvent
from estate_sales.models.items import Item
from estate_sales.models.sales import Sale
from estate_sales.models.sold_items import SoldItem


def _rows(query) -> list[dict]:
    return [row._asdict() for row in query.all()]


def _first(query) -> dict | None:
    row = query.first()
    return row._asdict() if row is not None else None


def _customer_name():
    return (Customer.first_name + " " + Customer.last_name)


# =========================================================
# EVENTS
# =========================================================

def _event_query(db: Session):
    return db.query(
        EstateSaleEvent.id.label("event_id"),
        EstateSaleEvent.title,
        EstateSaleEvent.start_date,
        EstateSaleEvent.end_date,
        EstateSaleEvent.location,
        EstateSaleEvent.description,
    )


def list_events(db: Session) -> list[dict]:
    return _rows(_event_query(db).order_by(EstateSaleEvent.start_date.desc()))


def get_event(db: Session, event_id: int) -> dict | None:
    return _first(_event_query(db).filter(EstateSaleEvent.id == event_id))


def event_dropdown(db: Session) -> list[dict]:
    return _rows(
        db.query(EstateSaleEvent.id.label("event_id"), EstateSaleEvent.title)
        .order_by(EstateSaleEvent.title)
    )


# =========================================================
# ITEMS
# =========================================================

def _item_query(db: Session):
    return (
        db.query(
            Item.id.label("item_id"),
            Item.event_id,
            Item.name,
            Item.category,
            Item.description,
            Item.starting_price,
            Item.status,
            func.coalesce(EstateSaleEvent.title, "No Event Assigned").label("event_title"),
        )
        .outerjoin(EstateSaleEvent, Item.event_id == EstateSaleEvent.id)
    )


def list_items(db: Session) -> list[dict]:
    return _rows(_item_query(db).order_by(Item.event_id, Item.name))


def get_item(db: Session, item_id: int) -> dict | None:
    return _first(_item_query(db).filter(Item.id == item_id))


def available_items(db: Session) -> list[dict]:
    return _rows(
        db.query(
            Item.id.label("item_id"),
            Item.name,
            Item.starting_price,
            EstateSaleEvent.title.label("event_title"),
        )
        .outerjoin(EstateSaleEvent, Item.event_id == EstateSaleEvent.id)
        .filter(Item.status == "Available")
        .order_by(Item.name)
    )


# =========================================================
# CUSTOMERS
# =========================================================

def _customer_query(db: Session):
    return db.query(
        Customer.id.label("customer_id"),
        Customer.first_name,
        Customer.last_name,
        Customer.email,
        Customer.phone,
        Customer.created_at,
    )


def list_customers(db: Session) -> list[dict]:
    return _rows(_customer_query(db).order_by(Customer.last_name, Customer.first_name))


def get_customer(db: Session, customer_id: int) -> dict | None:
    return _first(_customer_query(db).filter(Customer.id == customer_id))


def customer_dropdown(db: Session) -> list[dict]:
    return _rows(
        db.query(
            Customer.id.label("customer_id"),
            _customer_name().label("full_name"),
        )
        .order_by(Customer.last_name, Customer.first_name)
    )


# =========================================================
# SALES
# =========================================================

def _sale_query(db: Session):
    return (
        db.query(
            Sale.id.label("sale_id"),
            Sale.customer_id,
            Sale.sale_date,
            Sale.total_amount,
            Sale.payment_method,
            _customer_name().label("customer_name"),
        )
        .join(Customer, Sale.customer_id == Customer.id)
    )


def list_sales(db: Session) -> list[dict]:
    return _rows(_sale_query(db).order_by(Sale.sale_date.desc(), Sale.id.desc()))


def get_sale(db: Session, sale_id: int) -> dict | None:
    return _first(_sale_query(db).filter(Sale.id == sale_id))


# =========================================================
# SOLD ITEMS
# =========================================================

def _sold_item_query(db: Session):
    return (
        db.query(
            SoldItem.sale_id,
            SoldItem.item_id,
            SoldItem.unit_price,
            SoldItem.quantity,
            Item.name.label("item_name"),
            Item.category,
            Item.starting_price,
            _customer_name().label("customer_name"),
            Sale.sale_date,
            Sale.payment_method,
            EstateSaleEvent.title.label("event_title"),
        )
        .join(Item, SoldItem.item_id == Item.id)
        .join(Sale, SoldItem.sale_id == Sale.id)
        .join(Customer, Sale.customer_id == Customer.id)
        .outerjoin(EstateSaleEvent, Item.event_id == EstateSaleEvent.id)
    )


def list_sold_items(db: Session) -> list[dict]:
    return _rows(_sold_item_query(db).order_by(Sale.sale_date.desc(), Item.name))


def get_sold_item(db: Session, sale_id: int, item_id: int) -> dict | None:
    return _first(
        _sold_item_query(db).filter(
            SoldItem.sale_id == sale_id,
            SoldItem.item_id == item_id,
        )
    )


def sale_lines(db: Session, sale_id: int) -> list[dict]:
    return _rows(
        db.query(
            SoldItem.sale_id,
            SoldItem.item_id,
            SoldItem.unit_price,
            SoldItem.quantity,
            Item.name.label("item_name"),
            Item.category,
            Item.description,
        )
        .join(Item, SoldItem.item_id == Item.id)
        .filter(SoldItem.sale_id == sale_id)
        .order_by(Item.name)
    )


# =========================================================
# DIAGNOSTICS
# =========================================================

def table_counts(db: Session) -> dict:
    return {
        "items": db.query(func.count(Item.id)).scalar(),
        "events": db.query(func.count(EstateSaleEvent.id)).scalar(),
        "customers": db.query(func.count(Customer.id)).scalar(),
        "sales": db.query(func.count(Sale.id)).scalar(),
        "soldItems": db.query(func.count(SoldItem.item_id)).scalar(),
    }
