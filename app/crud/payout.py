# app/crud/payout.py
from datetime import datetime
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.affiliate import AffiliatePayout


def create_payout(
    db: Session,
    affiliate_id: int,
    amount: Decimal,
    payout_method: str,
    payout_details: str | None = None
) -> AffiliatePayout:
    """Создает заявку на выплату в статусе 'pending'."""
    db_payout = AffiliatePayout(
        affiliate_id=affiliate_id,
        amount=amount,
        status="pending",
        payout_method=payout_method,
        payout_details=payout_details
    )
    db.add(db_payout)
    db.commit()
    db.refresh(db_payout)
    return db_payout

def get_payout_by_id(db: Session, payout_id: int) -> AffiliatePayout | None:
    return db.query(AffiliatePayout).filter(AffiliatePayout.id == payout_id).first()

def get_payouts_by_affiliate(db: Session, affiliate_id: int) -> list[AffiliatePayout]:
    return db.query(AffiliatePayout).filter(
        AffiliatePayout.affiliate_id == affiliate_id
    ).order_by(AffiliatePayout.created_at.desc(), AffiliatePayout.id.desc()).all()

def get_payouts_by_status(db: Session, status: str) -> list[AffiliatePayout]:
    return db.query(AffiliatePayout).filter(
        AffiliatePayout.status == status
    ).order_by(AffiliatePayout.created_at.asc(), AffiliatePayout.id.asc()).all()

def set_payout_status(
    db: Session,
    payout: AffiliatePayout,
    status: str,
    processed_at: datetime | None = None
) -> AffiliatePayout:
    """Меняет статус; processed_at обновляется только если передан (и никогда не сбрасывается)."""
    payout.status = status
    if processed_at is not None:
        payout.processed_at = processed_at
    db.commit()
    db.refresh(payout)
    return payout

def sum_amount_by_status(db: Session, status: str) -> Decimal:
    total = db.query(func.sum(AffiliatePayout.amount)).filter(AffiliatePayout.status == status).scalar()
    return total if total is not None else Decimal("0.00")
