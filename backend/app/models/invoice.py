"""Invoice model. Amounts are integer cents; ``date`` is an ISO calendar date."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base

INVOICE_STATUSES = ("paid", "pending")


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, index=True)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    status = Column(String(16), nullable=False)
    date = Column(String(10), nullable=False)

    customer = relationship("Customer", back_populates="invoices")
