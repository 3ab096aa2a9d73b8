from sih_portal.models.team import Team
from sih_portal.models.jury import Jury
from sih_portal.models.submission import Submission, MAX_SUBMISSIONS_PER_TEAM
from sih_portal.models.evaluation import Evaluation, Assignment

__all__ = ["Team", "Jury", "Submission", "MAX_SUBMISSIONS_PER_TEAM", "Evaluation", "Assignment"]
