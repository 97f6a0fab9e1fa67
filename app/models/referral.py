# app/models/referral.py
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, func

from app.db.session import Base

COMMISSION_STATUSES = ("pending", "approved", "paid", "cancelled")

class AffiliateReferral(Base):
    __tablename__ = "affiliate_referrals"
    id = Column(Integer, primary_key=True, index=True)

    # Партнер, которому засчитывается реферал
    affiliate_id = Column(Integer, ForeignKey("affiliates.id"), nullable=False, index=True)
    # Приглашенный пользователь
    referred_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # Подписка, которая принесла комиссию (если есть)
    membership_purchase_id = Column(Integer, ForeignKey("subscriptions.id"), nullable=True)

    commission_amount = Column(Numeric(10, 2), nullable=False)

    # 'pending' -> 'approved' (админ) -> 'paid'; 'cancelled' существует только в схеме
    commission_status = Column(String, default="pending", nullable=False, server_default='pending')

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
