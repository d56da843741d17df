# estate_sales/core/tables.py
"""Column descriptors for rendering entity listings as tables.

Each entity maps to the query that lists it and the columns to show, so a
table (an Excel sheet here) can be filled from any listing without knowing
its shape.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, NamedTuple

from estate_sales.core import queries


class TableColumn(NamedTuple):
    key: str
    header: str
    format: Callable | None = None


class EntityTable(NamedTuple):
    title: str
    fetch: Callable
    columns: list[TableColumn]


def money(value):
    return float(value) if value is not None else None


def day(value):
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, date):
        return value.isoformat()
    return value


ENTITY_TABLES = {
    "events": EntityTable(
        title="Events",
        fetch=queries.list_events,
        columns=[
            TableColumn("event_id", "Event ID"),
            TableColumn("title", "Title"),
            TableColumn("start_date", "Start Date", day),
            TableColumn("end_date", "End Date", day),
            TableColumn("location", "Location"),
            TableColumn("description", "Description"),
        ],
    ),
    "items": EntityTable(
        title="Items",
        fetch=queries.list_items,
        columns=[
            TableColumn("item_id", "Item ID"),
            TableColumn("event_title", "Event"),
            TableColumn("name", "Name"),
            TableColumn("category", "Category"),
            TableColumn("starting_price", "Starting Price", money),
            TableColumn("status", "Status"),
        ],
    ),
    "customers": EntityTable(
        title="Customers",
        fetch=queries.list_customers,
        columns=[
            TableColumn("customer_id", "Customer ID"),
            TableColumn("first_name", "First Name"),
            TableColumn("last_name", "Last Name"),
            TableColumn("email", "Email"),
            TableColumn("phone", "Phone"),
            TableColumn("created_at", "Created", day),
        ],
    ),
    "sales": EntityTable(
        title="Sales",
        fetch=queries.list_sales,
        columns=[
            TableColumn("sale_id", "Sale ID"),
            TableColumn("customer_name", "Customer"),
            TableColumn("sale_date", "Sale Date", day),
            TableColumn("payment_method", "Payment Method"),
            TableColumn("total_amount", "Total Amount", money),
        ],
    ),
    "solditems": EntityTable(
        title="Sold Items",
        fetch=queries.list_sold_items,
        columns=[
            TableColumn("sale_id", "Sale ID"),
            TableColumn("item_id", "Item ID"),
            TableColumn("item_name", "Item"),
            TableColumn("customer_name", "Customer"),
            TableColumn("sale_date", "Sale Date", day),
            TableColumn("unit_price", "Unit Price", money),
            TableColumn("quantity", "Quantity"),
        ],
    ),
}


def table_rows(columns: list[TableColumn], rows: list[dict]) -> list[list]:
    """Header row followed by one formatted row per record."""
    rendered = [[column.header for column in columns]]

    for row in rows:
        rendered.append([
            column.format(row.get(column.key)) if column.format else row.get(column.key)
            for column in columns
        ])

    return rendered


def money_total(rows: list[dict], key: str) -> Decimal:
    return sum((Decimal(str(row[key] or 0)) for row in rows), Decimal("0.00"))
