import logging
from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any

from sih_portal.core.exceptions import AuthenticationError, StorageError
from sih_portal.core.security.auth import verify_password
from sih_portal.crud.juries import get_jury_by_email
from sih_portal.db.session import get_db
from sih_portal.schemas.jury import LoginRequest, JuryProfile

router = APIRouter(prefix="/jury", tags=["jury"])
logger = logging.getLogger(__name__)
error_logger = logging.getLogger("sih_portal.errors")

@router.post("/login", response_model=JuryProfile)
def login(body: Any = Body(default=None), db: Session = Depends(get_db)):
    request = LoginRequest.from_body(body)
    try:
        jury = get_jury_by_email(request.email, db) if request.email else None
    except SQLAlchemyError as e:
        error_logger.error(f"Jury lookup failed: {e}", exc_info=True)
        raise StorageError(str(e))

    # Same answer for an unknown email and a wrong password
    if not jury or not verify_password(request.password, jury.password_hash):
        logger.info("Rejected jury login")
        raise AuthenticationError()

    logger.info(f"Jury {jury.jury_id} logged in")
    return JuryProfile.model_validate(jury)
