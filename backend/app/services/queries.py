"""Read queries behind the dashboard, invoices and customers pages."""

from math import ceil
from typing import List, Optional

from sqlalchemy import String, case, cast, func, or_
from sqlalchemy.orm import Session

from backend.app.core.currency import format_currency, from_cents
from backend.app.core.settings import get_settings
from backend.app.models.customer import Customer
from backend.app.models.invoice import Invoice
from backend.app.schemas.customer import CustomerField, CustomerTableRow
from backend.app.schemas.dashboard import CardData
from backend.app.schemas.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice

LATEST_INVOICES_LIMIT = 5


def _sum_by_status(status: str):
    return func.coalesce(func.sum(case((Invoice.status == status, Invoice.amount), else_=0)), 0)


def _filtered_invoices(db: Session, query: str):
    pattern = f"%{query}%"
    return (
        db.query(Invoice, Customer)
        .join(Customer, Invoice.customer_id == Customer.id)
        .filter(
            or_(
                Customer.name.ilike(pattern),
                Customer.email.ilike(pattern),
                cast(Invoice.amount, String).ilike(pattern),
                Invoice.date.ilike(pattern),
                Invoice.status.ilike(pattern),
            )
        )
    )


def fetch_filtered_invoices(db: Session, query: str = "", page: int = 1) -> List[InvoiceTableRow]:
    per_page = get_settings().items_per_page
    offset = (max(page, 1) - 1) * per_page
    rows = (
        _filtered_invoices(db, query)
        .order_by(Invoice.date.desc(), Invoice.id.desc())
        .offset(offset)
        .limit(per_page)
        .all()
    )
    return [
        InvoiceTableRow(
            id=invoice.id,
            customer_id=customer.id,
            name=customer.name,
            email=customer.email,
            image_url=customer.image_url,
            date=invoice.date,
            amount=invoice.amount,
            amount_display=format_currency(invoice.amount),
            status=invoice.status,
        )
        for invoice, customer in rows
    ]


def fetch_invoice_pages(db: Session, query: str = "") -> int:
    total = _filtered_invoices(db, query).count()
    return ceil(total / get_settings().items_per_page)


def fetch_invoice_by_id(db: Session, invoice_id: str) -> Optional[InvoiceForm]:
    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
    if invoice is None:
        return None
    return InvoiceForm(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=from_cents(invoice.amount),
        status=invoice.status,
    )


def fetch_customers(db: Session) -> List[CustomerField]:
    customers = db.query(Customer).order_by(Customer.name.asc()).all()
    return [CustomerField.model_validate(customer) for customer in customers]


def fetch_filtered_customers(db: Session, query: str = "") -> List[CustomerTableRow]:
    pattern = f"%{query}%"
    rows = (
        db.query(
            Customer.id,
            Customer.name,
            Customer.email,
            Customer.image_url,
            func.count(Invoice.id),
            _sum_by_status("pending"),
            _sum_by_status("paid"),
        )
        .outerjoin(Invoice, Invoice.customer_id == Customer.id)
        .filter(or_(Customer.name.ilike(pattern), Customer.email.ilike(pattern)))
        .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
        .order_by(Customer.name.asc())
        .all()
    )
    return [
        CustomerTableRow(
            id=customer_id,
            name=name,
            email=email,
            image_url=image_url,
            total_invoices=total_invoices,
            total_pending=format_currency(total_pending),
            total_paid=format_currency(total_paid),
        )
        for customer_id, name, email, image_url, total_invoices, total_pending, total_paid in rows
    ]


def fetch_latest_invoices(db: Session) -> List[LatestInvoice]:
    rows = (
        db.query(Invoice, Customer)
        .join(Customer, Invoice.customer_id == Customer.id)
        .order_by(Invoice.date.desc(), Invoice.id.desc())
        .limit(LATEST_INVOICES_LIMIT)
        .all()
    )
    return [
        LatestInvoice(
            id=invoice.id,
            name=customer.name,
            email=customer.email,
            image_url=customer.image_url,
            amount=format_currency(invoice.amount),
        )
        for invoice, customer in rows
    ]


def fetch_card_data(db: Session) -> CardData:
    invoice_count = db.query(func.count(Invoice.id)).scalar() or 0
    customer_count = db.query(func.count(Customer.id)).scalar() or 0
    paid, pending = db.query(_sum_by_status("paid"), _sum_by_status("pending")).one()
    return CardData(
        number_of_invoices=invoice_count,
        number_of_customers=customer_count,
        total_paid_invoices=format_currency(paid),
        total_pending_invoices=format_currency(pending),
    )
