# studyhub/schemas/stats.py
from studyhub.schemas.base import CamelModel


class StatsPublic(CamelModel):
    total_questions: int
    total_categories: int
    total_views: int
