# wms_api/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from wms_api.config import settings

# 1. Connection string from settings (.env / environment), SQLite by default
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# 2. SQLAlchemy needs postgresql:// instead of the legacy postgres:// scheme
if SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

# 3. Driver-specific options
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False} # SQLite only
else:
    connect_args = {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args, echo=settings.SQL_ECHO
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None):
    # Register every table on Base.metadata before creating them
    from wms_api.models import (  # noqa: F401
        batch, buyer, carrier, employee, inbound_order, locality,
        log, product, purchase_order, section, seller, warehouse,
    )
    Base.metadata.create_all(bind=bind or engine)
