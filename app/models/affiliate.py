# app/models/affiliate.py
from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship

from app.db.session import Base
from .user import User

PAYOUT_STATUSES = ("pending", "processing", "completed", "failed")

class Affiliate(Base):
    __tablename__ = "affiliates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Вида AFF<user_id><epoch_ms>, уникален по построению
    affiliate_code = Column(String, unique=True, index=True, nullable=False)

    # Доля от 0 до 1
    commission_rate = Column(Numeric(5, 4), nullable=False)

    # Накопительные счетчики, обновляются только явно (update_affiliate_stats)
    total_earnings = Column(Numeric(10, 2), default=0, nullable=False, server_default='0')
    total_referrals = Column(Integer, default=0, nullable=False, server_default='0')

    is_active = Column(Boolean, default=True, nullable=False, server_default='true')
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship(User)


class AffiliatePayout(Base):
    __tablename__ = "affiliate_payouts"

    id = Column(Integer, primary_key=True, index=True)
    affiliate_id = Column(Integer, ForeignKey("affiliates.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)

    # 'pending', 'processing', 'completed', 'failed'
    status = Column(String, default="pending", nullable=False, server_default='pending')

    payout_method = Column(String, nullable=False)
    payout_details = Column(Text, nullable=True)

    # Проставляется при переходе в обработку/завершение, никогда не сбрасывается
    processed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
