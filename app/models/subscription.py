# app/models/subscription.py
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, func

from app.db.session import Base

SUBSCRIPTION_STATUSES = ("pending", "active", "cancelled", "expired")

class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    membership_level_id = Column(Integer, ForeignKey("membership_levels.id"), nullable=False)

    # ID подписки во внешнем биллинге (Stripe и т.п.)
    provider_subscription_id = Column(String, nullable=True)

    # 'pending', 'active', 'cancelled', 'expired'
    status = Column(String, default="pending", nullable=False, server_default='pending')

    current_period_start = Column(DateTime(timezone=True), nullable=False)
    current_period_end = Column(DateTime(timezone=True), nullable=False)

    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String, default="USD", nullable=False, server_default='USD')

    affiliate_id = Column(Integer, ForeignKey("affiliates.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
