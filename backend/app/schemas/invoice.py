"""Invoice schemas.

``InvoiceSchema`` is the canonical shape of an invoice as submitted through the
dashboard forms. ``CreateInvoice`` and ``UpdateInvoice`` are the form-facing
shapes: they drop ``id`` (generated on create, taken from the URL on update)
and ``date`` (set on create, immutable afterwards).

All schema classes are frozen and hold no per-request state, so the classes
themselves are shared by every validation call.
"""

from decimal import Decimal, InvalidOperation
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from backend.app.core.currency import to_cents
from backend.app.models.invoice import INVOICE_STATUSES

CUSTOMER_REQUIRED = "Please select a customer."
AMOUNT_NOT_POSITIVE = "Please enter an amount greater than $0."
STATUS_REQUIRED = "Please select an invoice status."
AMOUNT_TOO_LARGE = "Please enter a smaller amount."

# Amounts are stored as signed 64-bit integer cents.
MAX_AMOUNT_CENTS = 2**63 - 1
MAX_AMOUNT_DIGITS = 16

InvoiceStatus = Literal["paid", "pending"]


def coerce_amount(value) -> Decimal:
    """Numeric coercion for form input: blank or missing is 0, junk is NaN."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    text = str(value).strip()
    if not text:
        return Decimal(0)
    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal("NaN")


class InvoiceFields(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def require_positive_amount(cls, value):
        amount = coerce_amount(value)
        if not amount.is_finite() or amount <= 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        # Beyond this magnitude the cents value cannot fit the column, and the
        # Decimal context would overflow while computing it.
        if amount.adjusted() > MAX_AMOUNT_DIGITS:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)
        cents = to_cents(amount)
        if cents > MAX_AMOUNT_CENTS:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)
        if cents <= 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_status(cls, value):
        if value not in INVOICE_STATUSES:
            raise PydanticCustomError("status_required", STATUS_REQUIRED)
        return value

    @property
    def amount_cents(self) -> int:
        return to_cents(self.amount)


class InvoiceSchema(InvoiceFields):
    id: str
    date: str


class CreateInvoice(InvoiceFields):
    pass


class UpdateInvoice(InvoiceFields):
    pass


FORM_FIELDS = tuple(field.alias or name for name, field in InvoiceFields.model_fields.items())


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: int
    status: str
    date: str


class InvoiceForm(BaseModel):
    """Invoice as shown in the edit form; amount in major units."""

    id: str
    customer_id: str
    amount: Decimal
    status: str


class InvoiceTableRow(BaseModel):
    id: str
    customer_id: str
    name: str
    email: str
    image_url: Optional[str] = None
    date: str
    amount: int
    amount_display: str
    status: str


class InvoicePage(BaseModel):
    query: str
    page: int
    total_pages: int
    invoices: List[InvoiceTableRow]


class LatestInvoice(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    amount: str
