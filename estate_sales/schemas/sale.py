# schemas/sale.py

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import Field

from estate_sales.schemas.common import ApiInput, ApiModel, MessageResponse

PaymentMethod = Literal["Cash", "Credit Card", "Check"]


class SaleCreate(ApiInput):
    customer_id: int
    sale_date: date
    total_amount: Decimal = Field(Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)
    payment_method: PaymentMethod


# totalAmount left out keeps the stored total
class SaleUpdate(SaleCreate):
    total_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)


class SaleResponse(ApiModel):
    sale_id: int
    customer_id: int
    sale_date: date
    total_amount: float
    payment_method: str
    customer_name: str


class SaleCreatedResponse(MessageResponse):
    sale_id: int
