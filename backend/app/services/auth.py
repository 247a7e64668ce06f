"""Sign-in through the credentials provider.

``CredentialsProvider`` plays the identity provider: it verifies an email and
password against ``users`` and issues a session token, or raises an
``AuthError`` whose ``type`` says why. ``authenticate`` turns those errors into
the message shown on the login form. Anything that is not an ``AuthError``
(a database outage, for instance) is left to propagate.
"""

import logging
from typing import Literal, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from backend.app.core.security import create_access_token, verify_password
from backend.app.models.user import User
from backend.app.schemas.login import LoginRequest

logger = logging.getLogger(__name__)

CREDENTIALS_STRATEGY = "credentials"
INVALID_CREDENTIALS = "Invalid credentials."
SOMETHING_WENT_WRONG = "Something went wrong."


class AuthError(Exception):
    type = "AuthError"


class CredentialsSignin(AuthError):
    type = "CredentialsSignin"


class InvalidProvider(AuthError):
    type = "InvalidProvider"


class SignedIn(BaseModel):
    ok: Literal[True] = True
    user_id: str
    token: str


class SignInFailed(BaseModel):
    ok: Literal[False] = False
    message: str


SignInResult = Union[SignedIn, SignInFailed]


class CredentialsProvider:
    strategy = CREDENTIALS_STRATEGY

    def __init__(self, db: Session):
        self.db = db

    def authorize(self, form: Mapping) -> Optional[User]:
        try:
            credentials = LoginRequest.model_validate(
                {"email": form.get("email"), "password": form.get("password")}
            )
        except ValidationError:
            return None
        user = self.db.query(User).filter(User.email == credentials.email).first()
        if not user or not user.hashed_password:
            return None
        if not verify_password(credentials.password, user.hashed_password):
            return None
        return user

    def sign_in(self, strategy: str, form: Mapping) -> SignedIn:
        if strategy != self.strategy:
            raise InvalidProvider(f"Unsupported sign-in strategy: {strategy}")
        user = self.authorize(form)
        if user is None:
            raise CredentialsSignin("Credentials rejected")
        return SignedIn(user_id=user.id, token=create_access_token(user_id=user.id))


def authenticate(previous_state: Optional[str], form: Mapping, provider: CredentialsProvider) -> SignInResult:
    try:
        return provider.sign_in(CREDENTIALS_STRATEGY, form)
    except AuthError as error:
        logger.warning("Sign-in failed: %s", error.type)
        if error.type == CredentialsSignin.type:
            return SignInFailed(message=INVALID_CREDENTIALS)
        return SignInFailed(message=SOMETHING_WENT_WRONG)
