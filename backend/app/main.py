# Invoice dashboard backend entrypoint.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backend.app.core.logs import configure_logging
from backend.app.core.settings import get_settings
from backend.app.api import login
from backend.app.api import dashboard
from backend.app.api import invoices
from backend.app.core.dev_seed import ensure_default_dev_data
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

configure_logging()
settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(login.router)
app.include_router(dashboard.router)
app.include_router(invoices.router)


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def seed_default_dev_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_dev_data(db)
    finally:
        db.close()
