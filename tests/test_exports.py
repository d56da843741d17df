# tests/test_exports.py
from io import BytesIO

from openpyxl import load_workbook

from estate_sales.core.tables import ENTITY_TABLES, TableColumn, table_rows


def _workbook(response):
    return load_workbook(BytesIO(response.content))


def test_debug_table_counts(client):
    assert client.get("/api/debug/tables").json() == {
        "items": 10,
        "events": 3,
        "customers": 5,
        "sales": 5,
        "soldItems": 5,
    }


def test_export_items_sheet(client):
    response = client.get("/api/exports/items")

    assert response.status_code == 200
    assert response.headers["content-disposition"] == 'attachment; filename="items.xlsx"'

    sheet = _workbook(response)["Items"]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0] == ("Item ID", "Event", "Name", "Category", "Starting Price", "Status")
    assert len(rows) == 11
    assert rows[1][2] == "Antique Oak Dining Table"
    assert rows[1][4] == 450.0


def test_export_sales_has_revenue_total(client):
    sheet = _workbook(client.get("/api/exports/sales"))["Sales"]

    assert sheet.cell(row=sheet.max_row, column=1).value == "Total Revenue"
    assert sheet.cell(row=sheet.max_row, column=5).value == 830.0


def test_export_all_has_a_sheet_per_entity(client):
    workbook = _workbook(client.get("/api/exports/all"))

    assert workbook.sheetnames == [table.title for table in ENTITY_TABLES.values()]


def test_export_unknown_entity_is_404(client):
    response = client.get("/api/exports/widgets")

    assert response.status_code == 404
    assert response.json()["message"] == "Unknown export: widgets"


def test_table_rows_apply_formatters():
    columns = [
        TableColumn("name", "Name"),
        TableColumn("price", "Price", lambda value: value * 2),
    ]

    rendered = table_rows(columns, [{"name": "Lamp", "price": 3}, {"name": "Rug", "price": 5}])

    assert rendered == [["Name", "Price"], ["Lamp", 6], ["Rug", 10]]
