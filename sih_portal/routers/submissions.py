import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from sih_portal.core.exceptions import AppError, StorageError
from sih_portal.crud import submissions as submissions_crud
from sih_portal.db.session import get_db
from sih_portal.schemas.submission import SubmissionRequest, SubmissionDisplay
from sih_portal.services.admission import admit_submission

router = APIRouter(tags=["submissions"])
error_logger = logging.getLogger("sih_portal.errors")

@router.post("/submit", response_model=SubmissionDisplay)
def submit(request: SubmissionRequest, db: Session = Depends(get_db)):
    try:
        return admit_submission(request, db)
    except AppError:
        raise
    except SQLAlchemyError as e:
        error_logger.error(f"Submission for team {request.team_id} failed: {e}", exc_info=True)
        raise StorageError(str(e))

@router.get("/submissions", response_model=List[SubmissionDisplay])
def get_submissions(
    search: Optional[str] = None,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    db: Session = Depends(get_db)
):
    try:
        return submissions_crud.list_submissions(db, search=search, sort=sort, order=order)
    except SQLAlchemyError as e:
        error_logger.error(f"Listing submissions failed: {e}", exc_info=True)
        raise StorageError(str(e))

@router.patch("/submissions/{submission_id}/presented", response_model=SubmissionDisplay)
def mark_presented(submission_id: int, db: Session = Depends(get_db)):
    try:
        return submissions_crud.mark_presented(submission_id, db)
    except AppError:
        raise
    except SQLAlchemyError as e:
        error_logger.error(f"Marking submission {submission_id} presented failed: {e}", exc_info=True)
        raise StorageError(str(e))

@router.delete("/submissions/{submission_id}")
def delete_submission(submission_id: int, db: Session = Depends(get_db)):
    try:
        submissions_crud.delete_submission(submission_id, db)
    except SQLAlchemyError as e:
        error_logger.error(f"Deleting submission {submission_id} failed: {e}", exc_info=True)
        raise StorageError(str(e))
    return {"success": True}
