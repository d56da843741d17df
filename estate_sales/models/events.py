# estate_sales/models/events.py

from sqlalchemy import CheckConstraint, Column, Date, Integer, String, Text
from sqlalchemy.orm import relationship

from estate_sales.database import Base


class EstateSaleEvent(Base):
    __tablename__ = "estate_sale_events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    location = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    items = relationship(
        "Item",
        back_populates="event",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_event_dates_ordered"),
    )
