# app/routers/v1/endpoints/membership.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.dependencies import get_current_user, get_db
from app.models.user import User
from app.schemas.membership import MembershipLevel, UserMembership
from app.services import membership as membership_service

router = APIRouter()


@router.get("/membership-levels", response_model=List[MembershipLevel])
def get_membership_levels(db: Session = Depends(get_db)):
    """Витрина тарифов: только активные уровни."""
    return membership_service.list_membership_levels(db, active_only=True)


@router.get("/membership-levels/{level_id}", response_model=MembershipLevel)
def get_membership_level(level_id: int, db: Session = Depends(get_db)):
    level = membership_service.get_membership_level(db, level_id)
    if not level:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="membership level not found")
    return level


@router.get("/users/me/memberships", response_model=List[UserMembership])
def get_my_memberships(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return membership_service.list_user_memberships(db, current_user.id)


@router.get("/users/me/memberships/active", response_model=Optional[UserMembership])
def get_my_active_membership(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Действующее членство или null."""
    return membership_service.resolve_active_membership(db, current_user.id)
