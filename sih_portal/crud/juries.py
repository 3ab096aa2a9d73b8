from sqlalchemy.orm import Session
from sih_portal.core.security.auth import hash_password
from sih_portal.models.jury import Jury
from sih_portal.schemas.jury import JuryCreate

def get_jury_by_email(email: str, db: Session):
    return db.query(Jury).filter(Jury.email == email).first()

def get_jury_by_jury_id(jury_id: str, db: Session):
    return db.query(Jury).filter(Jury.jury_id == jury_id).first()

def create_jury(jury_req: JuryCreate, db: Session) -> Jury:
    jury = Jury(
        jury_id=jury_req.jury_id,
        name=jury_req.name,
        email=jury_req.email,
        department=jury_req.department,
        password_hash=hash_password(jury_req.password),
    )
    db.add(jury)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(jury)
    return jury
