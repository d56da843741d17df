# schemas/item.py

from decimal import Decimal
from typing import Literal

from pydantic import Field

from estate_sales.schemas.common import ApiInput, ApiModel, MessageResponse

ItemStatus = Literal["Available", "Held", "Sold"]


class ItemCreate(ApiInput):
    event_id: int
    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    starting_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    status: ItemStatus = "Available"


class ItemUpdate(ItemCreate):
    # Omitting status on update keeps the current one
    status: ItemStatus | None = None


class ItemResponse(ApiModel):
    item_id: int
    event_id: int
    name: str
    category: str | None = None
    description: str | None = None
    starting_price: float
    status: str
    event_title: str | None = None


class AvailableItemResponse(ApiModel):
    item_id: int
    name: str
    starting_price: float
    event_title: str | None = None


class ItemCreatedResponse(MessageResponse):
    item_id: int
