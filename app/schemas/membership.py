# app/schemas/membership.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class MembershipLevelCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    duration_days: int = Field(..., gt=0)
    features: List[str]
    is_active: bool = True

class MembershipLevelUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    duration_days: Optional[int] = Field(None, gt=0)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("name", "price", "duration_days", "features", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

class MembershipLevel(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: Decimal
    duration_days: int
    features: List[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserMembershipCreate(BaseModel):
    user_id: int
    membership_level_id: int
    # Если не переданы: старт = сейчас, конец = старт + duration_days уровня
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

class UserMembership(BaseModel):
    id: int
    user_id: int
    membership_level_id: int
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
