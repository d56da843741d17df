# schemas/event.py

from datetime import date

from pydantic import Field, model_validator

from estate_sales.schemas.common import ApiInput, ApiModel, MessageResponse


class EventCreate(ApiInput):
    title: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    location: str = Field(..., min_length=1, max_length=255)
    description: str | None = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        return self


# Updates replace every column, so they take the same body as creates
EventUpdate = EventCreate


class EventResponse(ApiModel):
    event_id: int
    title: str
    start_date: date
    end_date: date
    location: str
    description: str | None = None


class EventDropdownResponse(ApiModel):
    event_id: int
    title: str


class EventCreatedResponse(MessageResponse):
    event_id: int
