# app/routers/v1/endpoints/admin/affiliates.py

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.affiliate import (
    Affiliate,
    AffiliateCreate,
    AffiliateEarnings,
    AffiliatePayout,
    AffiliateStatsUpdate,
)
from app.schemas.analytics import AffiliateStats
from app.schemas.referral import AffiliateReferral
from app.services import affiliate as affiliate_service
from app.services import analytics as analytics_service
from app.services import payout as payout_service
from app.services import referral as referral_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Affiliate])
def get_affiliates_list(db: Session = Depends(get_db)):
    return affiliate_service.list_affiliates(db)


@router.post("", response_model=Affiliate, status_code=status.HTTP_201_CREATED)
def create_affiliate(affiliate_data: AffiliateCreate, db: Session = Depends(get_db)):
    """[АДМИН] Делает пользователя партнером, код генерируется автоматически."""
    return affiliate_service.create_affiliate(db, affiliate_data)


@router.get("/{affiliate_id}", response_model=Affiliate)
def get_affiliate_details(affiliate_id: int, db: Session = Depends(get_db)):
    return affiliate_service.require_affiliate(db, affiliate_id)


@router.post("/{affiliate_id}/deactivate", response_model=Affiliate)
def deactivate_affiliate(affiliate_id: int, db: Session = Depends(get_db)):
    return affiliate_service.deactivate_affiliate(db, affiliate_id)


@router.get("/{affiliate_id}/stats", response_model=AffiliateStats)
def get_affiliate_stats(affiliate_id: int, db: Session = Depends(get_db)):
    return analytics_service.get_affiliate_stats(db, affiliate_id)


@router.put("/{affiliate_id}/stats", response_model=Affiliate)
def update_affiliate_stats(
    affiliate_id: int,
    stats_data: AffiliateStatsUpdate,
    db: Session = Depends(get_db)
):
    """
    [АДМИН] Перезаписывает накопленные total_earnings и total_referrals.
    Значения не прибавляются, а заменяются.
    """
    return affiliate_service.update_affiliate_stats(
        db, affiliate_id, earnings=stats_data.earnings, referrals=stats_data.referrals
    )


@router.get("/{affiliate_id}/earnings", response_model=AffiliateEarnings)
def get_affiliate_earnings(affiliate_id: int, db: Session = Depends(get_db)):
    earnings = payout_service.calculate_affiliate_earnings(db, affiliate_id)
    return AffiliateEarnings(affiliate_id=affiliate_id, earnings=earnings)


@router.get("/{affiliate_id}/referrals", response_model=List[AffiliateReferral])
def get_affiliate_referrals(affiliate_id: int, db: Session = Depends(get_db)):
    return referral_service.list_affiliate_referrals(db, affiliate_id)


@router.get("/{affiliate_id}/payouts", response_model=List[AffiliatePayout])
def get_affiliate_payouts(affiliate_id: int, db: Session = Depends(get_db)):
    return payout_service.list_affiliate_payouts(db, affiliate_id)
