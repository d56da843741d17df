# schemas/customer.py

import re
from datetime import datetime

from pydantic import Field, field_validator

from estate_sales.schemas.common import ApiInput, ApiModel, MessageResponse

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CustomerCreate(ApiInput):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=30)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email format")
        return value


CustomerUpdate = CustomerCreate


class CustomerResponse(ApiModel):
    customer_id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    created_at: datetime | None = None


class CustomerDropdownResponse(ApiModel):
    customer_id: int
    full_name: str


class CustomerCreatedResponse(MessageResponse):
    customer_id: int
