from decimal import Decimal

import pytest
from pydantic import ValidationError

from backend.app.schemas.invoice import (
    AMOUNT_NOT_POSITIVE,
    AMOUNT_TOO_LARGE,
    MAX_AMOUNT_CENTS,
    CUSTOMER_REQUIRED,
    FORM_FIELDS,
    STATUS_REQUIRED,
    CreateInvoice,
    InvoiceSchema,
)
from backend.app.services.validation import CREATE_FAILED, UPDATE_FAILED, validate_create, validate_update


def test_form_fields_use_form_names():
    assert FORM_FIELDS == ("customerId", "amount", "status")


def test_valid_input_is_coerced():
    result = validate_create({"customerId": "c1", "amount": "42.5", "status": "paid"})
    assert result.ok
    assert result.data.customer_id == "c1"
    assert result.data.amount == Decimal("42.5")
    assert result.data.status == "paid"


def test_missing_customer_is_reported():
    result = validate_create({"amount": "10", "status": "paid"})
    assert not result.ok
    assert result.errors == {"customerId": [CUSTOMER_REQUIRED]}
    assert result.message == CREATE_FAILED


@pytest.mark.parametrize("customer_id", ["", "   ", None, 7])
def test_blank_or_wrong_type_customer_is_reported(customer_id):
    result = validate_create({"customerId": customer_id, "amount": "10", "status": "paid"})
    assert not result.ok
    assert result.errors["customerId"] == [CUSTOMER_REQUIRED]


@pytest.mark.parametrize("amount", ["0", "-3", "", None, "abc", "NaN", "Infinity", "0.001", "0.004", "1e-999999999"])
def test_non_positive_amount_is_reported(amount):
    result = validate_create({"customerId": "c1", "amount": amount, "status": "pending"})
    assert not result.ok
    assert result.errors == {"amount": [AMOUNT_NOT_POSITIVE]}


@pytest.mark.parametrize("status", [None, "", "overdue", "PAID"])
def test_unknown_status_is_reported(status):
    result = validate_create({"customerId": "c1", "amount": "10", "status": status})
    assert not result.ok
    assert result.errors == {"status": [STATUS_REQUIRED]}


def test_every_bad_field_is_reported_together():
    result = validate_create({})
    assert not result.ok
    assert set(result.errors) == {"customerId", "amount", "status"}
    assert result.to_state().message == CREATE_FAILED


def test_update_uses_update_message():
    result = validate_update({"customerId": "c1", "amount": "0", "status": "paid"})
    assert not result.ok
    assert result.message == UPDATE_FAILED


def test_form_id_and_date_are_ignored():
    result = validate_update(
        {"id": "other", "date": "1999-01-01", "customerId": "c2", "amount": "5", "status": "pending"}
    )
    assert result.ok
    assert not hasattr(result.data, "date")
    assert not hasattr(result.data, "id")


def test_canonical_schema_requires_id_and_date():
    with pytest.raises(ValidationError):
        InvoiceSchema.model_validate({"customerId": "c1", "amount": "1", "status": "paid"})
    invoice = InvoiceSchema.model_validate(
        {"id": "inv1", "customerId": "c1", "amount": "1", "status": "paid", "date": "2024-01-01"}
    )
    assert invoice.date == "2024-01-01"


def test_validated_fields_are_immutable():
    fields = CreateInvoice.model_validate({"customerId": "c1", "amount": "1", "status": "paid"})
    with pytest.raises(ValidationError):
        fields.amount = Decimal("2")


@pytest.mark.parametrize("amount", ["1e20", "1e30", "1e999999999", "99999999999999999", "92233720368547758.08"])
def test_amount_beyond_storable_cents_is_reported(amount):
    result = validate_create({"customerId": "c1", "amount": amount, "status": "paid"})
    assert not result.ok
    assert result.errors == {"amount": [AMOUNT_TOO_LARGE]}


def test_largest_storable_amount_is_accepted():
    result = validate_create({"customerId": "c1", "amount": "92233720368547758.07", "status": "paid"})
    assert result.ok
    assert result.data.amount_cents == MAX_AMOUNT_CENTS


@pytest.mark.parametrize(("amount", "cents"), [("42.5", 4250), ("0.005", 1), ("19.994", 1999), ("5", 500)])
def test_validated_amount_exposes_cents(amount, cents):
    result = validate_create({"customerId": "c1", "amount": amount, "status": "pending"})
    assert result.ok
    assert result.data.amount_cents == cents
