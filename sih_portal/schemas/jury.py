from pydantic import BaseModel, EmailStr, Field
from typing import Any, Optional

class LoginRequest(BaseModel):
    # Missing fields are a failed login, not a malformed request
    email: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "LoginRequest":
        """Keep only string credentials; any other body shape logs in as nobody"""
        if not isinstance(body, dict):
            return cls()
        fields = {}
        for key in ("email", "password"):
            value = body.get(key)
            if isinstance(value, str):
                fields[key] = value
        return cls(**fields)

class JuryProfile(BaseModel):
    jury_id: str
    name: str
    department: Optional[str] = None

    class Config:
        from_attributes = True

class JuryCreate(BaseModel):
    jury_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: EmailStr
    department: Optional[str] = None
    password: str = Field(min_length=1)
