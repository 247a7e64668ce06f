"""Result types returned by the form actions.

Expected failures travel as values. Each union carries an ``ok`` discriminant so
callers branch on data rather than on exceptions.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from backend.app.schemas.invoice import InvoiceFields


class FormState(BaseModel):
    """State handed back to a form for re-rendering."""

    errors: Dict[str, List[str]] = Field(default_factory=dict)
    message: Optional[str] = None


class ValidInvoice(BaseModel):
    ok: Literal[True] = True
    data: InvoiceFields


class InvalidInvoice(BaseModel):
    ok: Literal[False] = False
    errors: Dict[str, List[str]]
    message: str

    def to_state(self) -> FormState:
        return FormState(errors=self.errors, message=self.message)


InvoiceValidation = Union[ValidInvoice, InvalidInvoice]


class WriteOk(BaseModel):
    ok: Literal[True] = True
    message: Optional[str] = None


class WriteError(BaseModel):
    ok: Literal[False] = False
    message: str


WriteResult = Union[WriteOk, WriteError]


class Redirect(BaseModel):
    location: str


ActionOutcome = Union[Redirect, FormState]
