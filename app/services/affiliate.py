# app/services/affiliate.py
import logging
from decimal import Decimal
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.crud import affiliate as crud_affiliate
from app.models.affiliate import Affiliate
from app.schemas.affiliate import AffiliateCreate
from app.services import user as user_service
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


def generate_affiliate_code(user_id: int, created_at_ms: int) -> str:
    """
    Код партнера: префикс + ID пользователя + момент создания в миллисекундах.
    Уникален по построению, повторные попытки при коллизии не нужны.
    """
    return f"{settings.AFFILIATE_CODE_PREFIX}{user_id}{created_at_ms}"

def create_affiliate(db: Session, data: AffiliateCreate) -> Affiliate:
    # Уникальность "один партнер на пользователя" не проверяется
    user_service.require_user(db, data.user_id)

    now = utcnow()
    code = generate_affiliate_code(data.user_id, int(now.timestamp() * 1000))
    affiliate = crud_affiliate.create_affiliate(
        db, user_id=data.user_id, affiliate_code=code,
        commission_rate=data.commission_rate, is_active=data.is_active
    )
    logger.info(f"Registered affiliate {affiliate.id} for user {data.user_id} with code '{code}' (rate {data.commission_rate})")
    return affiliate

def require_affiliate(db: Session, affiliate_id: int) -> Affiliate:
    affiliate = crud_affiliate.get_affiliate_by_id(db, affiliate_id)
    if not affiliate:
        raise NotFoundError("affiliate not found")
    return affiliate

def get_affiliate_by_user_id(db: Session, user_id: int) -> Affiliate | None:
    return crud_affiliate.get_affiliate_by_user_id(db, user_id)

def get_affiliate_by_code(db: Session, code: str) -> Affiliate | None:
    return crud_affiliate.get_affiliate_by_code(db, code)

def list_affiliates(db: Session) -> list[Affiliate]:
    return crud_affiliate.get_affiliates(db)

def update_affiliate_stats(db: Session, affiliate_id: int, earnings: Decimal, referrals: int) -> Affiliate:
    affiliate = require_affiliate(db, affiliate_id)
    affiliate = crud_affiliate.update_affiliate_stats(db, affiliate, earnings=earnings, referrals=referrals, now=utcnow())
    logger.info(f"Affiliate {affiliate.id} stats set: earnings={earnings}, referrals={referrals}")
    return affiliate

def deactivate_affiliate(db: Session, affiliate_id: int) -> Affiliate:
    affiliate = require_affiliate(db, affiliate_id)
    affiliate = crud_affiliate.deactivate_affiliate(db, affiliate, now=utcnow())
    logger.info(f"Affiliate {affiliate.id} deactivated.")
    return affiliate
