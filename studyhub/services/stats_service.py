# studyhub/services/stats_service.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from studyhub.models.category import Category
from studyhub.models.question import Question
from studyhub.schemas.stats import StatsPublic


def get_stats(db: Session) -> StatsPublic:
    total_questions, total_views = db.query(
        func.count(Question.id),
        func.coalesce(func.sum(Question.views), 0),
    ).one()
    total_categories = db.query(func.count(Category.id)).scalar()

    return StatsPublic(
        total_questions=total_questions or 0,
        total_categories=total_categories or 0,
        total_views=int(total_views or 0),
    )
