# app/crud/user_membership.py
from datetime import datetime
from sqlalchemy.orm import Session
from app.models.membership import UserMembership


def get_membership_by_id(db: Session, membership_id: int) -> UserMembership | None:
    return db.query(UserMembership).filter(UserMembership.id == membership_id).first()

def get_user_memberships(db: Session, user_id: int) -> list[UserMembership]:
    """Все членства пользователя, включая истекшие (от новых к старым)."""
    return db.query(UserMembership).filter(
        UserMembership.user_id == user_id
    ).order_by(UserMembership.start_date.desc(), UserMembership.id.desc()).all()

def get_active_membership(db: Session, user_id: int, now: datetime) -> UserMembership | None:
    """
    Действующее членство: is_active и now попадает в [start_date, end_date].
    БД не запрещает несколько действующих членств, берем последнее начатое.
    """
    return db.query(UserMembership).filter(
        UserMembership.user_id == user_id,
        UserMembership.is_active == True,
        UserMembership.start_date <= now,
        UserMembership.end_date >= now
    ).order_by(UserMembership.start_date.desc(), UserMembership.id.desc()).first()

def create_user_membership(
    db: Session,
    user_id: int,
    membership_level_id: int,
    start_date: datetime,
    end_date: datetime
) -> UserMembership:
    db_membership = UserMembership(
        user_id=user_id,
        membership_level_id=membership_level_id,
        start_date=start_date,
        end_date=end_date,
        is_active=True
    )
    db.add(db_membership)
    db.commit()
    db.refresh(db_membership)
    return db_membership

def expire_membership(db: Session, membership: UserMembership, now: datetime) -> UserMembership:
    """Закрывает членство: строку не удаляем, только гасим флаг и обрезаем end_date."""
    membership.is_active = False
    membership.end_date = now
    db.commit()
    db.refresh(membership)
    return membership
