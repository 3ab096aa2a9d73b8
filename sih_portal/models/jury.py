from sqlalchemy import Column, Integer, String
from sih_portal.db.base import Base

class Jury(Base):
    __tablename__ = "juries"
    id = Column(Integer, primary_key=True)
    jury_id = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    department = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)  # "<saltHex>:<derivedHex>"
