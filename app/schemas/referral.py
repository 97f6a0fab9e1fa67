# app/schemas/referral.py
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from pydantic import BaseModel, Field

CommissionStatus = Literal["pending", "approved", "paid", "cancelled"]


class AffiliateReferralCreate(BaseModel):
    affiliate_id: int
    referred_user_id: int
    membership_purchase_id: Optional[int] = None # ID подписки, принесшей комиссию
    commission_amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)

class ReferralStatusUpdate(BaseModel):
    status: CommissionStatus

class AffiliateReferral(BaseModel):
    id: int
    affiliate_id: int
    referred_user_id: int
    membership_purchase_id: int | None = None
    commission_amount: Decimal
    commission_status: CommissionStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
