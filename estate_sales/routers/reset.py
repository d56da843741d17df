# estate_sales/routers/reset.py

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Engine

from estate_sales.core.config import settings
from estate_sales.core.rate_limiter import limiter
from estate_sales.core.reset import reset_database
from estate_sales.database import get_engine

router = APIRouter(prefix="/api", tags=["Maintenance"])


@router.post("/reset")
@limiter.limit(settings.RATE_LIMIT_RESET)
def reset(request: Request, engine: Engine = Depends(get_engine)):
    """
    Drop every table, recreate the schema and reload the sample data.

    429 while another reset is running, 408 when it exceeds
    RESET_TIMEOUT_SECONDS, 500 when the rebuild itself fails.
    """
    elapsed = reset_database(engine, timeout=settings.RESET_TIMEOUT_SECONDS)

    return {
        "success": True,
        "message": "Database has been reset successfully",
        "duration": f"{elapsed * 1000:.0f}ms",
    }
