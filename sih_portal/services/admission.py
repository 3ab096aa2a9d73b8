import logging
from sqlalchemy.orm import Session

from sih_portal.crud.submissions import create_submission
from sih_portal.crud.teams import upsert_team
from sih_portal.models.submission import Submission
from sih_portal.schemas.submission import SubmissionRequest

logger = logging.getLogger(__name__)


def admit_submission(request: SubmissionRequest, db: Session) -> Submission:
    """
    Record a team's submission.

    The team record is refreshed first and stays refreshed even when the
    submission is then refused for quota. The two writes are separate
    transactions; repeating the upsert is harmless.

    Raises:
        QuotaExceededError: the team has no free submission slot
    """
    upsert_team(
        request.team_id,
        request.team_name,
        request.leader_name,
        request.leader_id,
        request.phone,
        db,
    )

    submission = create_submission(request.team_id, request.problem_code, request.slides_link, db)
    logger.info(
        f"Team {submission.team_id} submitted {submission.problem_code} "
        f"(problem {submission.problem_id}, slot {submission.ordinal})"
    )
    return submission
