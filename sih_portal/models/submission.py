from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, UniqueConstraint
from datetime import datetime, timezone
from sih_portal.db.base import Base

MAX_SUBMISSIONS_PER_TEAM = 2

class Submission(Base):
    __tablename__ = "submissions"
    __table_args__ = (
        # Each submission claims one of the team's slots, so the store itself
        # refuses a third row even when two requests pass the count together.
        UniqueConstraint("team_id", "ordinal", name="uq_submissions_team_ordinal"),
        CheckConstraint(
            f"ordinal >= 1 AND ordinal <= {MAX_SUBMISSIONS_PER_TEAM}",
            name="ck_submissions_ordinal_range",
        ),
    )

    id = Column(Integer, primary_key=True)
    team_id = Column(String, nullable=False, index=True)  # not a foreign key
    ordinal = Column(Integer, nullable=False)
    problem_id = Column(Integer, nullable=False, default=0)
    problem_code = Column(String, nullable=False)
    slides_link = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    presented = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return '<Submission {} from team {} at time {}>'.format(self.problem_code, self.team_id, self.created_at)
