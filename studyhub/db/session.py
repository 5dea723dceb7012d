# studyhub/db/session.py
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from studyhub.core.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# SQLite needs check_same_thread off for the threadpool FastAPI runs sync routes in
engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _configure_sqlite(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # built-in lower() only folds ASCII; ilike() compiles to lower(x) LIKE lower(y)
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
