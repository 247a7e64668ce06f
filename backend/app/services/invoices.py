"""Invoice writes. Each operation is a single statement against ``invoices``.

Storage faults are rolled back, logged and turned into a ``WriteError`` with a
user-facing message. Nothing is retried.
"""

import logging

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.models.ids import new_id
from backend.app.models.invoice import Invoice
from backend.app.schemas.results import WriteError, WriteOk, WriteResult

logger = logging.getLogger(__name__)

CREATE_ERROR = "Database Error: Failed to Create Invoice"
UPDATE_ERROR = "Database Error: Failed to Update Invoice"
DELETE_ERROR = "Database Error: Failed to Delete Invoice."
DELETED = "Deleted Invoice."


def new_invoice_id(customer_id: str) -> str:
    if get_settings().legacy_invoice_ids:
        return customer_id
    return new_id()


def _execute(db: Session, statement, error_message: str) -> WriteResult:
    try:
        db.execute(statement)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(error_message)
        return WriteError(message=error_message)
    return WriteOk()


def create_invoice(db: Session, *, customer_id: str, amount_cents: int, status: str, date: str) -> WriteResult:
    statement = insert(Invoice).values(
        id=new_invoice_id(customer_id),
        customer_id=customer_id,
        amount=amount_cents,
        status=status,
        date=date,
    )
    return _execute(db, statement, CREATE_ERROR)


def update_invoice(db: Session, *, invoice_id: str, customer_id: str, amount_cents: int, status: str) -> WriteResult:
    statement = (
        update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(customer_id=customer_id, amount=amount_cents, status=status)
    )
    return _execute(db, statement, UPDATE_ERROR)


def delete_invoice(db: Session, *, invoice_id: str) -> WriteResult:
    result = _execute(db, delete(Invoice).where(Invoice.id == invoice_id), DELETE_ERROR)
    if result.ok:
        return WriteOk(message=DELETED)
    return result
