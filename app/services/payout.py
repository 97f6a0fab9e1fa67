# app/services/payout.py
import logging
from decimal import Decimal
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud import payout as crud_payout
from app.crud import referral as crud_referral
from app.models.affiliate import AffiliatePayout
from app.schemas.affiliate import AffiliatePayoutCreate
from app.services import affiliate as affiliate_service
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)

# Статусы, при переходе в которые update_payout_status проставляет processed_at
_FINAL_PAYOUT_STATUSES = {"completed", "failed"}


def create_affiliate_payout(db: Session, data: AffiliatePayoutCreate) -> AffiliatePayout:
    affiliate_service.require_affiliate(db, data.affiliate_id)
    payout = crud_payout.create_payout(
        db,
        affiliate_id=data.affiliate_id,
        amount=data.amount,
        payout_method=data.payout_method,
        payout_details=data.payout_details
    )
    logger.info(f"Payout {payout.id} requested for affiliate {data.affiliate_id}: {payout.amount} via '{payout.payout_method}'")
    return payout

def require_payout(db: Session, payout_id: int) -> AffiliatePayout:
    payout = crud_payout.get_payout_by_id(db, payout_id)
    if not payout:
        raise NotFoundError("payout not found")
    return payout

def list_affiliate_payouts(db: Session, affiliate_id: int) -> list[AffiliatePayout]:
    return crud_payout.get_payouts_by_affiliate(db, affiliate_id)

def list_pending_payouts(db: Session) -> list[AffiliatePayout]:
    return crud_payout.get_payouts_by_status(db, "pending")

def process_payout(db: Session, payout_id: int) -> AffiliatePayout:
    """Переводит выплату в 'processing' из любого статуса и проставляет processed_at."""
    payout = require_payout(db, payout_id)
    payout = crud_payout.set_payout_status(db, payout, "processing", processed_at=utcnow())
    logger.info(f"Payout {payout.id} is being processed.")
    return payout

def update_payout_status(db: Session, payout_id: int, status: str) -> AffiliatePayout:
    """
    Меняет статус выплаты. processed_at проставляется только для 'completed'/'failed';
    для 'pending'/'processing' остается как был (в отличие от process_payout).
    """
    payout = require_payout(db, payout_id)
    processed_at = utcnow() if status in _FINAL_PAYOUT_STATUSES else None
    previous_status = payout.status
    payout = crud_payout.set_payout_status(db, payout, status, processed_at=processed_at)
    logger.info(f"Payout {payout.id} status changed: '{previous_status}' -> '{status}'")
    return payout

def calculate_affiliate_earnings(db: Session, affiliate_id: int) -> Decimal:
    """Сумма одобренных комиссий. Для партнера без них (или несуществующего) - 0."""
    return crud_referral.sum_commission(db, affiliate_id=affiliate_id, status="approved")
