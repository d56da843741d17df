# estate_sales/models/items.py

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from estate_sales.database import Base


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer,
        ForeignKey("estate_sale_events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    starting_price = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default="Available", server_default="Available")

    event = relationship("EstateSaleEvent", back_populates="items")

    __table_args__ = (
        Index("ix_items_status", "status"),
        CheckConstraint("starting_price >= 0", name="ck_starting_price_non_negative"),
        CheckConstraint(
            "status IN ('Available', 'Held', 'Sold')",
            name="ck_item_status_valid",
        ),
    )
