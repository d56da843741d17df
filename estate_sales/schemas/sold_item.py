# schemas/sold_item.py

from datetime import date
from decimal import Decimal

from pydantic import Field

from estate_sales.schemas.common import ApiInput, ApiModel


class SoldItemUpdate(ApiInput):
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(..., ge=1)


class SoldItemCreate(SoldItemUpdate):
    sale_id: int
    item_id: int


class SoldItemResponse(ApiModel):
    sale_id: int
    item_id: int
    unit_price: float
    quantity: int
    item_name: str
    category: str | None = None
    starting_price: float
    customer_name: str
    sale_date: date
    payment_method: str
    event_title: str | None = None


class SaleLineResponse(ApiModel):
    sale_id: int
    item_id: int
    unit_price: float
    quantity: int
    item_name: str
    category: str | None = None
    description: str | None = None
