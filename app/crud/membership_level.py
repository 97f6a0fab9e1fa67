# app/crud/membership_level.py
from sqlalchemy.orm import Session
from app.models.membership import MembershipLevel
from app.schemas.membership import MembershipLevelCreate, MembershipLevelUpdate


def get_membership_level_by_id(db: Session, level_id: int) -> MembershipLevel | None:
    return db.query(MembershipLevel).filter(MembershipLevel.id == level_id).first()

def get_membership_levels(db: Session, active_only: bool = False) -> list[MembershipLevel]:
    """Уровни членства по возрастанию цены."""
    query = db.query(MembershipLevel)
    if active_only:
        query = query.filter(MembershipLevel.is_active == True)
    return query.order_by(MembershipLevel.price.asc(), MembershipLevel.id.asc()).all()

def create_membership_level(db: Session, data: MembershipLevelCreate) -> MembershipLevel:
    db_level = MembershipLevel(**data.model_dump())
    db.add(db_level)
    db.commit()
    db.refresh(db_level)
    return db_level

def update_membership_level(db: Session, level: MembershipLevel, data: MembershipLevelUpdate) -> MembershipLevel:
    """Частичное обновление: поля, которых нет в запросе, не трогаем."""
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(level, field, value)
    db.commit()
    db.refresh(level)
    return level
