# studyhub/api/router.py
from fastapi import APIRouter

from studyhub.api.endpoints import auth, categories, health, questions, stats

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(categories.router)
api_router.include_router(questions.router)
api_router.include_router(stats.router)
api_router.include_router(health.router)
