import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.customer import Customer
from backend.app.models.user import User


DEFAULT_DEV_USER = {"name": "User", "email": "user@nextmail.com"}
DEFAULT_DEV_PASSWORD = "123456"
DEFAULT_DEV_CUSTOMERS = [
    {"name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
    {"name": "Michael Novotny", "email": "michael@novotny.com", "image_url": "/customers/michael-novotny.png"},
]


def ensure_default_dev_data(db: Session) -> None:
    """
    Create a default login and a few customers for local development.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    if not db.query(User).filter(User.email == DEFAULT_DEV_USER["email"]).first():
        db.add(User(hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD), **DEFAULT_DEV_USER))
        created = True

    for customer in DEFAULT_DEV_CUSTOMERS:
        if db.query(Customer).filter(Customer.email == customer["email"]).first():
            continue
        db.add(Customer(**customer))
        created = True

    if created:
        db.commit()
