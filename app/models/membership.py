# app/models/membership.py
from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, JSON, ForeignKey, DateTime, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.db.session import Base

class MembershipLevel(Base):
    __tablename__ = "membership_levels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Деньги храним только как fixed-point, без float
    price = Column(Numeric(10, 2), nullable=False)
    duration_days = Column(Integer, nullable=False)

    # Упорядоченный список фич уровня
    features = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    is_active = Column(Boolean, default=True, nullable=False, server_default='true')
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class UserMembership(Base):
    __tablename__ = "user_memberships"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    membership_level_id = Column(Integer, ForeignKey("membership_levels.id"), nullable=False)

    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)

    # Строки не удаляются: истечение = is_active=False + end_date=now
    is_active = Column(Boolean, default=True, nullable=False, server_default='true')
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    membership_level = relationship("MembershipLevel")
