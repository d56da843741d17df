# estate_sales/routers/events.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from estate_sales.core import queries
from estate_sales.core.cascades import delete_event as cascade_delete_event
from estate_sales.core.errors import NotFoundError
from estate_sales.database import get_db
from estate_sales.models.events import EstateSaleEvent
from estate_sales.schemas.common import MessageResponse
from estate_sales.schemas.event import (
    EventCreate,
    EventCreatedResponse,
    EventDropdownResponse,
    EventResponse,
    EventUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/events",
    tags=["Events"],
)


@router.get("", response_model=list[EventResponse])
def list_events(db: Session = Depends(get_db)):
    events = queries.list_events(db)
    logger.info(f"Events query: Found {len(events)} events")
    return events


# Declared before /{event_id} so "dropdown" is not read as an id
@router.get("/dropdown", response_model=list[EventDropdownResponse])
def events_dropdown(db: Session = Depends(get_db)):
    return queries.event_dropdown(db)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: int, db: Session = Depends(get_db)):
    event = queries.get_event(db, event_id)

    if not event:
        raise NotFoundError("Event not found")

    return event


@router.post("", response_model=EventCreatedResponse)
def create_event(event_data: EventCreate, db: Session = Depends(get_db)):
    event = EstateSaleEvent(**event_data.model_dump())

    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info(f"Event created with ID: {event.id}")

    return EventCreatedResponse(
        event_id=event.id,
        message="Event created successfully",
    )


@router.put("/{event_id}", response_model=MessageResponse)
def update_event(
    event_id: int,
    event_data: EventUpdate,
    db: Session = Depends(get_db),
):
    event = db.query(EstateSaleEvent).filter(EstateSaleEvent.id == event_id).first()

    if not event:
        raise NotFoundError("Event not found")

    for field, value in event_data.model_dump().items():
        setattr(event, field, value)

    db.commit()

    logger.info(f"Event {event_id} updated successfully")
    return MessageResponse(message="Event updated successfully")


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    item_count = cascade_delete_event(db, event_id)

    message = "Event deleted successfully"
    if item_count > 0:
        message += f" ({item_count} associated items also removed)"

    return MessageResponse(message=message)
