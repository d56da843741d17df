# Main application file


import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from estate_sales.database import engine
from estate_sales.core.config import settings
from estate_sales.core.errors import (
    EstateSaleError,
    database_error_handler,
    estate_sale_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from estate_sales.core.rate_limiter import limiter
from estate_sales.core.seed import seed_if_empty
from estate_sales.routers import (
    events,
    items,
    customers,
    sales,
    sold_items,
    reset,
    debug,
    exports,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("estate_sales")


# STARTUP

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ON_STARTUP:
        with engine.begin() as connection:
            if seed_if_empty(connection):
                logger.info("Empty database seeded with sample data")
    logger.info("Database connection pool configured and ready")
    yield


# APP INIT

app = FastAPI(
    title="Estate Sale Inventory API",
    description="Events, items, customers and sales for an estate sale business",
    version="1.0.0",
    lifespan=lifespan,
)


# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# ERROR ENVELOPES

app.add_exception_handler(EstateSaleError, estate_sale_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    message = (
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    if duration > settings.SLOW_REQUEST_MS:
        logger.warning(f"Slow request: {message}")
    else:
        logger.info(message)

    return response


# ROUTERS

app.include_router(events.router)
app.include_router(items.router)
app.include_router(customers.router)
app.include_router(sales.router)
app.include_router(sold_items.router)
app.include_router(reset.router)
app.include_router(debug.router)
app.include_router(exports.router)


# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "Estate Sale Inventory API is running"}
