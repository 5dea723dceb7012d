# studyhub/db/base.py
# Import every model so Base.metadata is complete for create_all / alembic
from studyhub.db.base_class import Base  # noqa

from studyhub.models.user import User  # noqa
from studyhub.models.session import WebSession  # noqa
from studyhub.models.category import Category  # noqa
from studyhub.models.question import Question  # noqa
