from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from travel_journal.core.config import DATABASE_URL

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # SQLite connections are shared with FastAPI's threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Widest integer a database driver will bind (signed 64-bit)
MAX_ROW_ID = 2**63 - 1


def fits_id_column(value: int) -> bool:
    return -MAX_ROW_ID - 1 <= value <= MAX_ROW_ID
