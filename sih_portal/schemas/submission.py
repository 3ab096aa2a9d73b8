from pydantic import BaseModel, Field, TypeAdapter, AnyUrl, field_validator
from pydantic import ValidationError as PydanticValidationError
from datetime import datetime
from sih_portal.utils.helpers import ensure_utc

_url_adapter = TypeAdapter(AnyUrl)

class SubmissionRequest(BaseModel):
    team_id: str = Field(min_length=1)
    team_name: str = Field(min_length=1)
    leader_name: str = Field(min_length=1)
    leader_id: str = Field(min_length=1)
    phone: str = Field(pattern=r"^[0-9]{10}$")
    problem_code: str = Field(min_length=1)
    slides_link: str

    @field_validator("slides_link")
    @classmethod
    def validate_slides_link(cls, v):
        # Checked as an absolute URL but stored exactly as submitted
        try:
            _url_adapter.validate_python(v)
        except PydanticValidationError:
            raise ValueError("slides_link must be a valid absolute URL")
        return v

class SubmissionDisplay(BaseModel):
    id: int
    team_id: str
    problem_id: int
    problem_code: str
    slides_link: str
    created_at: datetime
    presented: bool

    @field_validator("created_at")
    @classmethod
    def created_at_is_utc(cls, v):
        # SQLite hands DateTime(timezone=True) back without an offset
        return ensure_utc(v)

    class Config:
        from_attributes = True
