# estate_sales/routers/debug.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.database import get_db

router = APIRouter(prefix="/api/debug", tags=["Debug"])


@router.get("/tables")
def table_counts(db: Session = Depends(get_db)):
    return queries.table_counts(db)
