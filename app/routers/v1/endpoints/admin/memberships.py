# app/routers/v1/endpoints/admin/memberships.py

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.membership import (
    MembershipLevel,
    MembershipLevelCreate,
    MembershipLevelUpdate,
    UserMembership,
    UserMembershipCreate,
)
from app.services import membership as membership_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/membership-levels", response_model=List[MembershipLevel])
def get_all_membership_levels(db: Session = Depends(get_db)):
    """[АДМИН] Все уровни, включая отключенные."""
    return membership_service.list_membership_levels(db)


@router.post("/membership-levels", response_model=MembershipLevel, status_code=status.HTTP_201_CREATED)
def create_membership_level(level_data: MembershipLevelCreate, db: Session = Depends(get_db)):
    return membership_service.create_membership_level(db, level_data)


@router.put("/membership-levels/{level_id}", response_model=MembershipLevel)
def update_membership_level(
    level_id: int,
    level_data: MembershipLevelUpdate,
    db: Session = Depends(get_db)
):
    return membership_service.update_membership_level(db, level_id, level_data)


@router.post("/memberships", response_model=UserMembership, status_code=status.HTTP_201_CREATED)
def grant_membership(membership_data: UserMembershipCreate, db: Session = Depends(get_db)):
    """
    [АДМИН] Выдает пользователю членство. Без дат - с текущего момента
    на duration_days уровня.
    """
    return membership_service.create_user_membership(db, membership_data)


@router.post("/memberships/{membership_id}/expire", response_model=UserMembership)
def expire_membership(membership_id: int, db: Session = Depends(get_db)):
    return membership_service.expire_membership(db, membership_id)
