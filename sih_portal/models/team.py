from sqlalchemy import Column, Integer, String
from sih_portal.db.base import Base

class Team(Base):
    __tablename__ = "teams"
    id = Column(Integer, primary_key=True)
    team_id = Column(String, nullable=False, unique=True, index=True)
    team_name = Column(String, nullable=False)
    leader_name = Column(String, nullable=False)
    leader_id = Column(String, nullable=False)
    phone = Column(String, nullable=False)

    def __repr__(self):
        return '<Team {}: {} (leader {})>'.format(self.team_id, self.team_name, self.leader_name)
