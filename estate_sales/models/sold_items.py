# estate_sales/models/sold_items.py

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from estate_sales.database import Base


class SoldItem(Base):
    __tablename__ = "sold_items"

    sale_id = Column(
        Integer,
        ForeignKey("sales.id", ondelete="CASCADE"),
        primary_key=True,
    )
    item_id = Column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    sale = relationship("Sale", back_populates="lines")
    item = relationship("Item")

    __table_args__ = (
        CheckConstraint("unit_price >= 0", name="ck_unit_price_non_negative"),
        CheckConstraint("quantity >= 1", name="ck_quantity_at_least_one"),
    )
