"""Dashboard overview and customers pages."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.customer import CustomerTableRow
from backend.app.schemas.dashboard import DashboardOverview
from backend.app.services.queries import fetch_card_data, fetch_filtered_customers, fetch_latest_invoices

router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=DashboardOverview)
async def dashboard_overview(db: Session = Depends(get_db)):
    return DashboardOverview(cards=fetch_card_data(db), latest_invoices=fetch_latest_invoices(db))


@router.get("/customers", response_model=List[CustomerTableRow])
async def list_customers(query: str = "", db: Session = Depends(get_db)):
    return fetch_filtered_customers(db, query)
