# studyhub/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studyhub.api.errors import register_exception_handlers
from studyhub.api.router import api_router
from studyhub.core.config import settings
from studyhub.core.logging_config import setup_logging
from studyhub.core.security import default_verifier
from studyhub.core.sessions import DatabaseSessionStore, MemorySessionStore
from studyhub.db.init_db import create_tables, seed_default_categories
from studyhub.db.session import SessionLocal

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

if settings.SESSION_BACKEND == "memory":
    app.state.session_store = MemorySessionStore()
else:
    app.state.session_store = DatabaseSessionStore(SessionLocal)
app.state.credential_verifier = default_verifier()


@app.on_event("startup")
def on_startup():
    logger.info(f"Starting {settings.PROJECT_NAME}")
    create_tables()
    if settings.SEED_DEFAULT_CATEGORIES:
        with SessionLocal() as db:
            seed_default_categories(db)
    app.state.session_store.purge_expired()


app.include_router(api_router, prefix="/api")
