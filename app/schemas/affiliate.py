# app/schemas/affiliate.py
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from pydantic import BaseModel, Field

PayoutStatus = Literal["pending", "processing", "completed", "failed"]


class AffiliateCreate(BaseModel):
    user_id: int
    commission_rate: Decimal = Field(..., ge=0, le=1, max_digits=5, decimal_places=4)
    is_active: bool = True

class AffiliateStatsUpdate(BaseModel):
    """Ручная корректировка накопительных счетчиков партнера."""
    earnings: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    referrals: int = Field(..., ge=0)

class Affiliate(BaseModel):
    id: int
    user_id: int
    affiliate_code: str
    commission_rate: Decimal
    total_earnings: Decimal
    total_referrals: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class AffiliateEarnings(BaseModel):
    affiliate_id: int
    earnings: Decimal


# --- Выплаты ---
class AffiliatePayoutCreate(BaseModel):
    affiliate_id: int
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    payout_method: str = Field(..., min_length=1)
    payout_details: Optional[str] = None

class PayoutStatusUpdate(BaseModel):
    status: PayoutStatus

class AffiliatePayout(BaseModel):
    id: int
    affiliate_id: int
    amount: Decimal
    status: PayoutStatus
    payout_method: str
    payout_details: str | None = None
    processed_at: datetime | None = None
    created_at: datetime

    class Config:
        from_attributes = True

class PayoutRequest(BaseModel):
    """Заявка на выплату от самого партнера (affiliate_id берется из токена)."""
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    payout_method: str = Field(..., min_length=1)
    payout_details: Optional[str] = None
