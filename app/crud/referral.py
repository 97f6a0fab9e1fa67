# app/crud/referral.py
from datetime import datetime
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.referral import AffiliateReferral


def create_referral(
    db: Session,
    affiliate_id: int,
    referred_user_id: int,
    commission_amount: Decimal,
    membership_purchase_id: int | None = None
) -> AffiliateReferral:
    """Создает реферальную запись в статусе 'pending'."""
    db_referral = AffiliateReferral(
        affiliate_id=affiliate_id,
        referred_user_id=referred_user_id,
        membership_purchase_id=membership_purchase_id,
        commission_amount=commission_amount,
        commission_status="pending"
    )
    db.add(db_referral)
    db.commit()
    db.refresh(db_referral)
    return db_referral

def get_referral_by_id(db: Session, referral_id: int) -> AffiliateReferral | None:
    return db.query(AffiliateReferral).filter(AffiliateReferral.id == referral_id).first()

def get_referral_by_id_and_status(db: Session, referral_id: int, status: str) -> AffiliateReferral | None:
    return db.query(AffiliateReferral).filter(
        AffiliateReferral.id == referral_id,
        AffiliateReferral.commission_status == status
    ).first()

def get_referrals_by_affiliate(db: Session, affiliate_id: int) -> list[AffiliateReferral]:
    return db.query(AffiliateReferral).filter(
        AffiliateReferral.affiliate_id == affiliate_id
    ).order_by(AffiliateReferral.created_at.desc(), AffiliateReferral.id.desc()).all()

def get_referrals_by_status(db: Session, status: str) -> list[AffiliateReferral]:
    """Рефералы с определенным статусом, от старых к новым (очередь на модерацию)."""
    return db.query(AffiliateReferral).filter(
        AffiliateReferral.commission_status == status
    ).order_by(AffiliateReferral.created_at.asc(), AffiliateReferral.id.asc()).all()

def set_referral_status(db: Session, referral: AffiliateReferral, status: str, now: datetime) -> AffiliateReferral:
    referral.commission_status = status
    referral.updated_at = now
    db.commit()
    db.refresh(referral)
    return referral

def count_referrals(db: Session, affiliate_id: int, with_purchase_only: bool = False) -> int:
    """Подсчитывает рефералов партнера; with_purchase_only - только с привязанной покупкой."""
    query = db.query(AffiliateReferral).filter(AffiliateReferral.affiliate_id == affiliate_id)
    if with_purchase_only:
        query = query.filter(AffiliateReferral.membership_purchase_id.isnot(None))
    return query.count()

def sum_commission(
    db: Session,
    affiliate_id: int,
    status: str,
    created_since: datetime | None = None
) -> Decimal:
    """Точная сумма комиссий партнера с заданным статусом."""
    query = db.query(func.sum(AffiliateReferral.commission_amount)).filter(
        AffiliateReferral.affiliate_id == affiliate_id,
        AffiliateReferral.commission_status == status
    )
    if created_since is not None:
        query = query.filter(AffiliateReferral.created_at >= created_since)
    total = query.scalar()
    return total if total is not None else Decimal("0.00")
