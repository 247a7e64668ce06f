"""Form actions for the invoices pages.

Each action runs validate -> write -> navigate for one form submission. A
failure at either of the first two steps returns a ``FormState`` for the form to
re-render and skips everything after it.
"""

from typing import Mapping

from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.core.time import today_iso
from backend.app.schemas.results import ActionOutcome, FormState, WriteResult
from backend.app.services import invoices
from backend.app.services.navigation import revalidate_and_redirect, revalidate_path
from backend.app.services.validation import validate_create, validate_update


def create_invoice_action(db: Session, form: Mapping) -> ActionOutcome:
    validated = validate_create(form)
    if not validated.ok:
        return validated.to_state()

    fields = validated.data
    result = invoices.create_invoice(
        db,
        customer_id=fields.customer_id,
        amount_cents=fields.amount_cents,
        status=fields.status,
        date=today_iso(),
    )
    if not result.ok:
        return FormState(message=result.message)
    return revalidate_and_redirect(get_settings().invoices_path)


def update_invoice_action(db: Session, invoice_id: str, form: Mapping) -> ActionOutcome:
    validated = validate_update(form)
    if not validated.ok:
        return validated.to_state()

    fields = validated.data
    result = invoices.update_invoice(
        db,
        invoice_id=invoice_id,
        customer_id=fields.customer_id,
        amount_cents=fields.amount_cents,
        status=fields.status,
    )
    if not result.ok:
        return FormState(message=result.message)
    return revalidate_and_redirect(get_settings().invoices_path)


def delete_invoice_action(db: Session, invoice_id: str) -> WriteResult:
    result = invoices.delete_invoice(db, invoice_id=invoice_id)
    if result.ok:
        revalidate_path(get_settings().invoices_path)
    return result
