"""
Create a jury account.

Juries are never created through the API; organisers add them with:

    python -m sih_portal.scripts.create_jury --jury-id J01 --name "Dr. Rao" \
        --email rao@example.edu --department CSE --password s3cret
"""
import argparse
import logging
import sys

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from sih_portal.core.config.settings import get_settings
from sih_portal.crud.juries import create_jury, get_jury_by_email, get_jury_by_jury_id
from sih_portal.db.init_db import init_db
from sih_portal.db.session import create_db_engine, create_session_factory
from sih_portal.schemas.jury import JuryCreate

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create a jury account")
    parser.add_argument("--jury-id", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--department", default=None)
    parser.add_argument("--password", required=True)
    parser.add_argument("--database-url", default=None, help="Defaults to DATABASE_URL from settings")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    args = parse_args(argv)

    try:
        jury_req = JuryCreate(
            jury_id=args.jury_id,
            name=args.name,
            email=args.email,
            department=args.department,
            password=args.password,
        )
    except PydanticValidationError as e:
        logger.error(f"Invalid jury details: {e}")
        return 1

    engine = create_db_engine(args.database_url or get_settings().DATABASE_URL)
    init_db(engine)
    SessionLocal = create_session_factory(engine)

    try:
        with SessionLocal() as db:
            if get_jury_by_jury_id(jury_req.jury_id, db):
                logger.error(f"Jury {jury_req.jury_id} already exists")
                return 1
            if get_jury_by_email(jury_req.email, db):
                logger.error(f"Email {jury_req.email} is already registered")
                return 1
            try:
                jury = create_jury(jury_req, db)
            except IntegrityError as e:
                logger.error(f"Could not create jury: {e}")
                return 1
    finally:
        engine.dispose()

    logger.info(f"Created jury {jury.jury_id} ({jury.email})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
