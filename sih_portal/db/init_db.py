from sqlalchemy.engine import Engine

from sih_portal.db.base import Base
from sih_portal import models  # noqa: F401  registers every table on Base.metadata

def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)
