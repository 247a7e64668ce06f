"""Invoice pages and form actions."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.core.view_cache import view_cache
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.invoice import InvoicePage
from backend.app.schemas.results import ActionOutcome, Redirect
from backend.app.services.actions import create_invoice_action, delete_invoice_action, update_invoice_action
from backend.app.services.queries import (
    fetch_customers,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoice_pages,
)

router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"], dependencies=[Depends(get_current_user)])


def _action_response(outcome: ActionOutcome):
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.location, status_code=status.HTTP_303_SEE_OTHER)
    # Field errors mean nothing was written; a bare message means the write failed
    status_code = 422 if outcome.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content=outcome.model_dump())


@router.get("", response_model=InvoicePage)
async def list_invoices(query: str = "", page: int = 1, db: Session = Depends(get_db)):
    page = max(page, 1)

    def render() -> InvoicePage:
        return InvoicePage(
            query=query,
            page=page,
            total_pages=fetch_invoice_pages(db, query),
            invoices=fetch_filtered_invoices(db, query, page),
        )

    return view_cache.get_or_render(get_settings().invoices_path, (query, page), render)


@router.post("/create")
async def create_invoice(request: Request, db: Session = Depends(get_db)):
    form = await request.form()
    return _action_response(create_invoice_action(db, form))


@router.get("/{invoice_id}/edit")
async def edit_invoice_form(invoice_id: str, db: Session = Depends(get_db)):
    invoice = fetch_invoice_by_id(db, invoice_id)
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return {"invoice": invoice, "customers": fetch_customers(db)}


@router.post("/{invoice_id}/edit")
async def update_invoice(invoice_id: str, request: Request, db: Session = Depends(get_db)):
    form = await request.form()
    return _action_response(update_invoice_action(db, invoice_id, form))


@router.post("/{invoice_id}/delete")
async def delete_invoice(invoice_id: str, db: Session = Depends(get_db)):
    result = delete_invoice_action(db, invoice_id)
    status_code = status.HTTP_200_OK if result.ok else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content={"message": result.message})
