"""Dashboard overview schemas."""

from typing import List

from pydantic import BaseModel

from backend.app.schemas.invoice import LatestInvoice


class CardData(BaseModel):
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


class DashboardOverview(BaseModel):
    cards: CardData
    latest_invoices: List[LatestInvoice]
