from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from datetime import datetime, timezone
from sih_portal.db.base import Base

class Evaluation(Base):
    __tablename__ = "evaluations"
    id = Column(Integer, primary_key=True)
    team_id = Column(String, nullable=False, index=True)
    jury_id = Column(String, nullable=False, index=True)
    ppt_design = Column(Float, nullable=True)
    idea = Column(Float, nullable=True)
    pitching = Column(Float, nullable=True)
    project_impact = Column(Float, nullable=True)
    remarks = Column(Text, nullable=True)
    total_score = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

class Assignment(Base):
    __tablename__ = "assignments"
    id = Column(Integer, primary_key=True)
    team_id = Column(String, nullable=False, index=True)
    jury_id = Column(String, nullable=False, index=True)
