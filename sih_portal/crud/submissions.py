import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sih_portal.core.exceptions import NotFoundError, QuotaExceededError
from sih_portal.models.submission import Submission, MAX_SUBMISSIONS_PER_TEAM
from sih_portal.utils.helpers import get_utc_now, parse_problem_id

logger = logging.getLogger(__name__)

QUOTA_MESSAGE = f"Submission limit reached. Only {MAX_SUBMISSIONS_PER_TEAM} allowed per team."

SORTABLE_FIELDS = {
    "id": Submission.id,
    "team_id": Submission.team_id,
    "problem_id": Submission.problem_id,
    "problem_code": Submission.problem_code,
    "slides_link": Submission.slides_link,
    "created_at": Submission.created_at,
    "presented": Submission.presented,
}

def count_team_submissions(team_id: str, db: Session) -> int:
    return db.query(Submission).filter(Submission.team_id == team_id).count()

def free_ordinals(team_id: str, db: Session) -> List[int]:
    """Slots 1..MAX_SUBMISSIONS_PER_TEAM the team has not used yet, lowest first"""
    taken = {
        ordinal for (ordinal,) in
        db.query(Submission.ordinal).filter(Submission.team_id == team_id).all()
    }
    return [n for n in range(1, MAX_SUBMISSIONS_PER_TEAM + 1) if n not in taken]

def create_submission(team_id: str, problem_code: str, slides_link: str, db: Session) -> Submission:
    """
    Insert a submission for the team if it still has a free slot

    Raises:
        QuotaExceededError: the team already holds MAX_SUBMISSIONS_PER_TEAM submissions
    """
    ordinals = free_ordinals(team_id, db)
    if not ordinals:
        raise QuotaExceededError(QUOTA_MESSAGE)

    problem_id = parse_problem_id(problem_code)
    for ordinal in ordinals:
        submission = Submission(
            team_id=team_id,
            ordinal=ordinal,
            problem_id=problem_id,
            problem_code=problem_code,
            slides_link=slides_link,
            created_at=get_utc_now(),
            presented=False,
        )
        db.add(submission)
        try:
            db.commit()
        except IntegrityError:
            # A concurrent request claimed this slot between our read and write
            db.rollback()
            logger.info(f"Slot {ordinal} of team {team_id} was taken concurrently")
            continue
        db.refresh(submission)
        return submission

    raise QuotaExceededError(QUOTA_MESSAGE)

def list_submissions(db: Session, search: Optional[str] = None, sort: Optional[str] = None, order: Optional[str] = None):
    query = db.query(Submission)
    if search:
        query = query.filter(Submission.team_id.icontains(search, autoescape=True))

    column = SORTABLE_FIELDS.get(sort) if sort and order else None
    if column is not None:
        query = query.order_by(column.asc() if order == "asc" else column.desc(), Submission.id)
    else:
        query = query.order_by(Submission.id)
    return query.all()

def mark_presented(submission_id: int, db: Session) -> Submission:
    submission = db.query(Submission).filter(Submission.id == submission_id).first()
    if not submission:
        raise NotFoundError("Submission not found")
    submission.presented = True
    db.commit()
    db.refresh(submission)
    return submission

def delete_submission(submission_id: int, db: Session) -> None:
    submission = db.query(Submission).filter(Submission.id == submission_id).first()
    if submission:
        db.delete(submission)
        db.commit()
