# studyhub/db/deps.py
from typing import Generator

from studyhub.db.session import SessionLocal


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
