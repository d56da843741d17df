# estate_sales/models/sales.py

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from estate_sales.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    sale_date = Column(Date, nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    payment_method = Column(String(20), nullable=False)

    customer = relationship("Customer", back_populates="sales")

    lines = relationship(
        "SoldItem",
        back_populates="sale",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_sales_sale_date", "sale_date"),
        CheckConstraint("total_amount >= 0", name="ck_total_amount_non_negative"),
        CheckConstraint(
            "payment_method IN ('Cash', 'Credit Card', 'Check')",
            name="ck_payment_method_valid",
        ),
    )
