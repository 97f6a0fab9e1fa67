# app/routers/v1/endpoints/admin/referrals.py

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.referral import AffiliateReferral, AffiliateReferralCreate, ReferralStatusUpdate
from app.services import referral as referral_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AffiliateReferral, status_code=status.HTTP_201_CREATED)
def create_referral(referral_data: AffiliateReferralCreate, db: Session = Depends(get_db)):
    """
    [АДМИН] Регистрирует реферала партнера. Счетчики партнера
    при этом не меняются, их правят через PUT /affiliates/{id}/stats.
    """
    return referral_service.create_affiliate_referral(db, referral_data)


@router.get("/pending", response_model=List[AffiliateReferral])
def get_pending_referrals(db: Session = Depends(get_db)):
    """[АДМИН] Очередь комиссий на проверку, старые первыми."""
    return referral_service.list_pending_referrals(db)


@router.put("/{referral_id}/status", response_model=AffiliateReferral)
def update_referral_status(
    referral_id: int,
    status_data: ReferralStatusUpdate,
    db: Session = Depends(get_db)
):
    return referral_service.update_referral_status(db, referral_id, status_data.status)


@router.post("/{referral_id}/approve", response_model=AffiliateReferral)
def approve_referral(referral_id: int, db: Session = Depends(get_db)):
    """[АДМИН] Одобряет комиссию. Работает только для рефералов в статусе 'pending'."""
    return referral_service.approve_referral(db, referral_id)
