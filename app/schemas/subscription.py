# app/schemas/subscription.py
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from pydantic import BaseModel, Field

SubscriptionStatus = Literal["pending", "active", "cancelled", "expired"]


class SubscriptionCreate(BaseModel):
    user_id: int
    membership_level_id: int
    provider_subscription_id: Optional[str] = None
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=3) # None -> DEFAULT_CURRENCY
    affiliate_id: Optional[int] = None

class SubscriptionStatusUpdate(BaseModel):
    status: SubscriptionStatus

class Subscription(BaseModel):
    id: int
    user_id: int
    membership_level_id: int
    provider_subscription_id: str | None = None
    status: SubscriptionStatus
    current_period_start: datetime
    current_period_end: datetime
    amount: Decimal
    currency: str
    affiliate_id: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class SubscriptionRequest(BaseModel):
    """Оформление подписки самим пользователем (user_id берется из токена)."""
    membership_level_id: int
    provider_subscription_id: Optional[str] = None
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    affiliate_id: Optional[int] = None
