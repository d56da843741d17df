from io import BytesIO

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from openpyxl import Workbook
from sqlalchemy.orm import Session

from estate_sales.core.errors import NotFoundError
from estate_sales.core.rate_limiter import limiter
from estate_sales.core.tables import ENTITY_TABLES, money_total, table_rows
from estate_sales.database import get_db

router = APIRouter(prefix="/api/exports", tags=["Exports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


# =========================================================
# EXPORT ROUTES
# =========================================================

@router.get("/all")
@limiter.limit("10/minute")
def export_all(request: Request, db: Session = Depends(get_db)):
    workbook = Workbook()
    workbook.remove(workbook.active)

    for entity in ENTITY_TABLES:
        _write_sheet(workbook, db, entity)

    return _workbook_response(workbook, "estate_sales.xlsx")


@router.get("/{entity}")
@limiter.limit("10/minute")
def export_entity(entity: str, request: Request, db: Session = Depends(get_db)):
    if entity not in ENTITY_TABLES:
        raise NotFoundError(f"Unknown export: {entity}")

    workbook = Workbook()
    workbook.remove(workbook.active)
    _write_sheet(workbook, db, entity)

    return _workbook_response(workbook, f"{entity}.xlsx")


# =========================================================
# EXCEL BUILDER
# =========================================================

def _write_sheet(workbook: Workbook, db: Session, entity: str):
    table = ENTITY_TABLES[entity]
    rows = table.fetch(db)

    sheet = workbook.create_sheet(title=table.title)

    for values in table_rows(table.columns, rows):
        sheet.append(values)

    # Sales carry a grand total under the amount column
    if entity == "sales":
        sheet.append([])
        sheet.append(["Total Revenue", None, None, None, float(money_total(rows, "total_amount"))])

    return sheet


def _workbook_response(workbook: Workbook, filename: str):
    output = BytesIO()
    workbook.save(output)
    output.seek(0)

    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
