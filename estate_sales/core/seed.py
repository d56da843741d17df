# estate_sales/core/seed.py
"""Sample dataset loaded by a database reset (and into an empty database at startup).

Every sale's total equals the sum of its lines, and exactly the items that
appear on a line are marked Sold.
"""
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import func, insert, select, text
from sqlalchemy.engine import Connection

from estate_sales.database import Base
from estate_sales.models.customers import Customer
from estate_sales.models.events import EstateSaleEvent
from estate_sales.models.items import Item
from estate_sales.models.sales import Sale
from estate_sales.models.sold_items import SoldItem


SEED_EVENTS = [
    {
        "id": 1,
        "title": "Johnson Family Estate Sale",
        "start_date": date(2024, 3, 15),
        "end_date": date(2024, 3, 17),
        "location": "123 Oak Street, Portland, OR",
        "description": "Complete household contents including antiques, furniture, and collectibles",
    },
    {
        "id": 2,
        "title": "Modern Art & Vintage Collection",
        "start_date": date(2024, 4, 20),
        "end_date": date(2024, 4, 22),
        "location": "456 Pine Avenue, Eugene, OR",
        "description": "Contemporary art pieces and vintage mid-century furniture",
    },
    {
        "id": 3,
        "title": "Coin & Jewelry Estate Sale",
        "start_date": date(2024, 5, 10),
        "end_date": date(2024, 5, 12),
        "location": "789 Elm Drive, Salem, OR",
        "description": "Rare coins, precious jewelry, and luxury accessories",
    },
]

SEED_ITEMS = [
    {
        "id": 1, "event_id": 1, "name": "Antique Oak Dining Table", "category": "Furniture",
        "description": "Beautiful 1920s oak dining table with 6 matching chairs",
        "starting_price": Decimal("450.00"), "status": "Available",
    },
    {
        "id": 2, "event_id": 1, "name": "Royal Doulton China Set", "category": "Dishware",
        "description": "Complete 12-piece Royal Doulton china service",
        "starting_price": Decimal("275.00"), "status": "Sold",
    },
    {
        "id": 3, "event_id": 1, "name": "Victorian Jewelry Box", "category": "Accessories",
        "description": "Ornate Victorian jewelry box with velvet interior",
        "starting_price": Decimal("125.00"), "status": "Sold",
    },
    {
        "id": 4, "event_id": 2, "name": "Mid-Century Modern Sofa", "category": "Furniture",
        "description": "Pristine condition 1960s sectional sofa",
        "starting_price": Decimal("800.00"), "status": "Held",
    },
    {
        "id": 5, "event_id": 2, "name": "Abstract Oil Painting", "category": "Art",
        "description": "Original abstract oil painting by local artist",
        "starting_price": Decimal("150.00"), "status": "Available",
    },
    {
        "id": 6, "event_id": 2, "name": "Atomic Clock", "category": "Decor",
        "description": "1950s atomic sunburst wall clock",
        "starting_price": Decimal("85.00"), "status": "Sold",
    },
    {
        "id": 7, "event_id": 2, "name": "Boomerang Coffee Table", "category": "Furniture",
        "description": "Iconic mid-century boomerang-shaped coffee table",
        "starting_price": Decimal("320.00"), "status": "Sold",
    },
    {
        "id": 8, "event_id": 3, "name": "Gold Wedding Ring Set", "category": "Jewelry",
        "description": "14k gold wedding ring set with diamonds",
        "starting_price": Decimal("650.00"), "status": "Available",
    },
    {
        "id": 9, "event_id": 3, "name": "1964 Kennedy Half Dollar", "category": "Collectibles",
        "description": "Rare 1964 Kennedy half dollar in excellent condition",
        "starting_price": Decimal("25.00"), "status": "Sold",
    },
    {
        "id": 10, "event_id": 3, "name": "Pearl Necklace", "category": "Jewelry",
        "description": "Genuine cultured pearl necklace with gold clasp",
        "starting_price": Decimal("180.00"), "status": "Available",
    },
]

SEED_CUSTOMERS = [
    {
        "id": 1, "first_name": "Sarah", "last_name": "Johnson",
        "email": "sarah.johnson@email.com", "phone": "(503) 555-0123",
        "created_at": datetime(2024, 3, 14),
    },
    {
        "id": 2, "first_name": "Michael", "last_name": "Chen",
        "email": "michael.chen@email.com", "phone": "(503) 555-0456",
        "created_at": datetime(2024, 4, 19),
    },
    {
        "id": 3, "first_name": "Emily", "last_name": "Rodriguez",
        "email": "emily.rodriguez@email.com", "phone": "(503) 555-0789",
        "created_at": datetime(2024, 5, 9),
    },
    {
        "id": 4, "first_name": "David", "last_name": "Thompson",
        "email": "david.thompson@email.com", "phone": "(503) 555-0321",
        "created_at": datetime(2024, 4, 20),
    },
    {
        "id": 5, "first_name": "Lisa", "last_name": "Martinez",
        "email": "lisa.martinez@email.com", "phone": "(503) 555-0654",
        "created_at": datetime(2024, 3, 16),
    },
]

SEED_SALES = [
    {"id": 1, "customer_id": 1, "sale_date": date(2024, 3, 16), "total_amount": Decimal("275.00"), "payment_method": "Credit Card"},
    {"id": 2, "customer_id": 2, "sale_date": date(2024, 4, 21), "total_amount": Decimal("85.00"), "payment_method": "Cash"},
    {"id": 3, "customer_id": 3, "sale_date": date(2024, 5, 11), "total_amount": Decimal("25.00"), "payment_method": "Check"},
    {"id": 4, "customer_id": 1, "sale_date": date(2024, 3, 17), "total_amount": Decimal("125.00"), "payment_method": "Credit Card"},
    {"id": 5, "customer_id": 4, "sale_date": date(2024, 4, 22), "total_amount": Decimal("320.00"), "payment_method": "Cash"},
]

SEED_SOLD_ITEMS = [
    {"sale_id": 1, "item_id": 2, "unit_price": Decimal("275.00"), "quantity": 1},
    {"sale_id": 2, "item_id": 6, "unit_price": Decimal("85.00"), "quantity": 1},
    {"sale_id": 3, "item_id": 9, "unit_price": Decimal("25.00"), "quantity": 1},
    {"sale_id": 4, "item_id": 3, "unit_price": Decimal("125.00"), "quantity": 1},
    {"sale_id": 5, "item_id": 7, "unit_price": Decimal("320.00"), "quantity": 1},
]

# Parents before children
SEED_TABLES = [
    (EstateSaleEvent, SEED_EVENTS),
    (Item, SEED_ITEMS),
    (Customer, SEED_CUSTOMERS),
    (Sale, SEED_SALES),
    (SoldItem, SEED_SOLD_ITEMS),
]


def load_seed_data(connection: Connection) -> None:
    for model, rows in SEED_TABLES:
        connection.execute(insert(model.__table__), rows)

    if connection.dialect.name == "postgresql":
        _sync_sequences(connection)


def _sync_sequences(connection: Connection) -> None:
    # Explicit ids leave serial sequences behind; move them past the seeded rows
    for model, _ in SEED_TABLES:
        if model is SoldItem:
            continue
        table = model.__table__.name
        connection.execute(
            text("SELECT setval(pg_get_serial_sequence(:table, 'id'), (SELECT MAX(id) FROM " + table + "))"),
            {"table": table},
        )


def rebuild_schema(connection: Connection) -> None:
    """Drop and recreate every table, then load the sample data."""
    Base.metadata.drop_all(connection)
    Base.metadata.create_all(connection)
    load_seed_data(connection)


def seed_if_empty(connection: Connection) -> bool:
    """Create missing tables and load the sample data when there are no events or customers."""
    Base.metadata.create_all(connection)

    events = connection.execute(select(func.count()).select_from(EstateSaleEvent.__table__)).scalar()
    customers = connection.execute(select(func.count()).select_from(Customer.__table__)).scalar()
    if events or customers:
        return False

    load_seed_data(connection)
    return True
