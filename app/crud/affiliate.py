# app/crud/affiliate.py
from datetime import datetime
from decimal import Decimal
from typing import List, Tuple
from sqlalchemy.orm import Session
from app.models.affiliate import Affiliate
from app.models.user import User


def get_affiliate_by_id(db: Session, affiliate_id: int) -> Affiliate | None:
    return db.query(Affiliate).filter(Affiliate.id == affiliate_id).first()

def get_affiliate_by_user_id(db: Session, user_id: int) -> Affiliate | None:
    return db.query(Affiliate).filter(Affiliate.user_id == user_id).first()

def get_affiliate_by_code(db: Session, code: str) -> Affiliate | None:
    return db.query(Affiliate).filter(Affiliate.affiliate_code == code).first()

def get_affiliates(db: Session) -> list[Affiliate]:
    return db.query(Affiliate).order_by(Affiliate.id.asc()).all()

def count_all_affiliates(db: Session) -> int:
    return db.query(Affiliate).count()

def create_affiliate(
    db: Session,
    user_id: int,
    affiliate_code: str,
    commission_rate: Decimal,
    is_active: bool
) -> Affiliate:
    """Создает партнера с нулевыми накопительными счетчиками."""
    db_affiliate = Affiliate(
        user_id=user_id,
        affiliate_code=affiliate_code,
        commission_rate=commission_rate,
        total_earnings=Decimal("0"),
        total_referrals=0,
        is_active=is_active
    )
    db.add(db_affiliate)
    db.commit()
    db.refresh(db_affiliate)
    return db_affiliate

def update_affiliate_stats(
    db: Session,
    affiliate: Affiliate,
    earnings: Decimal,
    referrals: int,
    now: datetime
) -> Affiliate:
    """Перезаписывает накопительные счетчики (не инкремент)."""
    affiliate.total_earnings = earnings
    affiliate.total_referrals = referrals
    affiliate.updated_at = now
    db.commit()
    db.refresh(affiliate)
    return affiliate

def deactivate_affiliate(db: Session, affiliate: Affiliate, now: datetime) -> Affiliate:
    affiliate.is_active = False
    affiliate.updated_at = now
    db.commit()
    db.refresh(affiliate)
    return affiliate

def get_top_affiliates(db: Session, limit: int) -> List[Tuple[Affiliate, User]]:
    """Активные партнеры вместе с пользователем, по убыванию заработка."""
    return db.query(Affiliate, User).join(User, User.id == Affiliate.user_id).filter(
        Affiliate.is_active == True
    ).order_by(Affiliate.total_earnings.desc(), Affiliate.id.asc()).limit(limit).all()
