"""Narrow untyped invoice form input into typed fields."""

from typing import Dict, List, Mapping, Type

from pydantic import ValidationError

from backend.app.schemas.invoice import FORM_FIELDS, CreateInvoice, InvoiceFields, UpdateInvoice
from backend.app.schemas.results import InvalidInvoice, InvoiceValidation, ValidInvoice

CREATE_FAILED = "Missing Fields. Failed to Create Invoice."
UPDATE_FAILED = "Missing Fields. Failed to Update Invoice."


def collect_field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def validate_invoice_form(
    raw: Mapping, schema: Type[InvoiceFields], failure_message: str
) -> InvoiceValidation:
    # Absent keys are passed as None so they surface as field errors, not "Field required".
    candidate = {field: raw.get(field) for field in FORM_FIELDS}
    try:
        data = schema.model_validate(candidate)
    except ValidationError as exc:
        return InvalidInvoice(errors=collect_field_errors(exc), message=failure_message)
    return ValidInvoice(data=data)


def validate_create(raw: Mapping) -> InvoiceValidation:
    return validate_invoice_form(raw, CreateInvoice, CREATE_FAILED)


def validate_update(raw: Mapping) -> InvoiceValidation:
    return validate_invoice_form(raw, UpdateInvoice, UPDATE_FAILED)
