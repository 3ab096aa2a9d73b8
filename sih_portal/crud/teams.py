from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sih_portal.models.team import Team

def get_team(team_id: str, db: Session):
    return db.query(Team).filter(Team.team_id == team_id).first()

def _apply_team_fields(team: Team, team_name: str, leader_name: str, leader_id: str, phone: str):
    team.team_name = team_name
    team.leader_name = leader_name
    team.leader_id = leader_id
    team.phone = phone

def upsert_team(team_id: str, team_name: str, leader_name: str, leader_id: str, phone: str, db: Session) -> Team:
    """Create the team or overwrite its mutable fields, keyed by team_id"""
    team = get_team(team_id, db)
    if team is None:
        team = Team(team_id=team_id)
        db.add(team)
    _apply_team_fields(team, team_name, leader_name, leader_id, phone)

    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the same team_id first; update its row instead
        db.rollback()
        team = get_team(team_id, db)
        if team is None:
            raise
        _apply_team_fields(team, team_name, leader_name, leader_id, phone)
        db.commit()

    db.refresh(team)
    return team
