"""Customer schemas for the select box and the customers table."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CustomerField(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class CustomerTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    total_invoices: int
    total_pending: str
    total_paid: str
