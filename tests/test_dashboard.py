import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.customer import Customer
from backend.app.models.invoice import Invoice
from backend.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def login(client: TestClient):
    db = SessionLocal()
    db.add(User(name="User", email="user@nextmail.com", hashed_password=get_password_hash("123456")))
    db.commit()
    db.close()
    client.post("/login", data={"email": "user@nextmail.com", "password": "123456"}, follow_redirects=False)


def seed_invoices():
    db = SessionLocal()
    rabbit = Customer(id="cust-rabbit", name="Evil Rabbit", email="evil@rabbit.com")
    lee = Customer(id="cust-lee", name="Lee Robinson", email="lee@robinson.com")
    amy = Customer(id="cust-amy", name="Amy Burns", email="amy@burns.com")
    db.add_all([rabbit, lee, amy])
    db.add_all(
        [
            Invoice(id="i1", customer_id="cust-rabbit", amount=15795, status="pending", date="2022-12-06"),
            Invoice(id="i2", customer_id="cust-rabbit", amount=20348, status="pending", date="2022-11-14"),
            Invoice(id="i3", customer_id="cust-lee", amount=3040, status="paid", date="2022-10-29"),
            Invoice(id="i4", customer_id="cust-lee", amount=44800, status="paid", date="2023-09-10"),
        ]
    )
    db.commit()
    db.close()


def test_dashboard_cards_and_latest_invoices():
    client = TestClient(app)
    login(client)
    seed_invoices()

    resp = client.get("/dashboard")
    assert resp.status_code == 200
    data = resp.json()
    assert data["cards"] == {
        "number_of_invoices": 4,
        "number_of_customers": 3,
        "total_paid_invoices": "$478.40",
        "total_pending_invoices": "$361.43",
    }
    assert [row["id"] for row in data["latest_invoices"]] == ["i4", "i1", "i2", "i3"]
    assert data["latest_invoices"][0]["amount"] == "$448.00"


def test_empty_dashboard():
    client = TestClient(app)
    login(client)
    cards = client.get("/dashboard").json()["cards"]
    assert cards["number_of_invoices"] == 0
    assert cards["total_paid_invoices"] == "$0.00"


def test_customers_table_totals():
    client = TestClient(app)
    login(client)
    seed_invoices()

    rows = client.get("/dashboard/customers").json()
    assert [row["name"] for row in rows] == ["Amy Burns", "Evil Rabbit", "Lee Robinson"]
    by_name = {row["name"]: row for row in rows}
    assert by_name["Amy Burns"]["total_invoices"] == 0
    assert by_name["Amy Burns"]["total_paid"] == "$0.00"
    assert by_name["Evil Rabbit"]["total_invoices"] == 2
    assert by_name["Evil Rabbit"]["total_pending"] == "$361.43"
    assert by_name["Lee Robinson"]["total_paid"] == "$478.40"


def test_customers_search():
    client = TestClient(app)
    login(client)
    seed_invoices()

    rows = client.get("/dashboard/customers", params={"query": "RABBIT"}).json()
    assert [row["id"] for row in rows] == ["cust-rabbit"]
