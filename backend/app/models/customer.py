"""Customer model. Invoices reference customers by id."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.models.ids import new_id


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=True)

    invoices = relationship("Invoice", back_populates="customer")
