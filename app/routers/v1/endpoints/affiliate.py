# app/routers/v1/endpoints/affiliate.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.dependencies import get_current_user, get_db
from app.models.affiliate import Affiliate as AffiliateModel
from app.models.user import User
from app.schemas.affiliate import Affiliate, AffiliateEarnings, AffiliatePayout, AffiliatePayoutCreate, PayoutRequest
from app.schemas.analytics import AffiliateStats
from app.schemas.referral import AffiliateReferral
from app.services import affiliate as affiliate_service
from app.services import analytics as analytics_service
from app.services import payout as payout_service
from app.services import referral as referral_service

router = APIRouter(prefix="/affiliates")


def get_current_affiliate(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> AffiliateModel:
    """Партнерский аккаунт текущего пользователя, 404 если он не партнер."""
    affiliate = affiliate_service.get_affiliate_by_user_id(db, current_user.id)
    if not affiliate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="affiliate not found")
    return affiliate


@router.get("/by-code/{code}", response_model=Affiliate)
def get_affiliate_by_code(code: str, db: Session = Depends(get_db)):
    """Проверка реферального кода (например, при переходе по ссылке)."""
    affiliate = affiliate_service.get_affiliate_by_code(db, code)
    if not affiliate or not affiliate.is_active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="affiliate not found")
    return affiliate


@router.get("/me", response_model=Affiliate)
def get_my_affiliate(affiliate: AffiliateModel = Depends(get_current_affiliate)):
    return affiliate


@router.get("/me/stats", response_model=AffiliateStats)
def get_my_stats(
    affiliate: AffiliateModel = Depends(get_current_affiliate),
    db: Session = Depends(get_db)
):
    return analytics_service.get_affiliate_stats(db, affiliate.id)


@router.get("/me/earnings", response_model=AffiliateEarnings)
def get_my_earnings(
    affiliate: AffiliateModel = Depends(get_current_affiliate),
    db: Session = Depends(get_db)
):
    """Сумма одобренных, но еще не выплаченных комиссий."""
    earnings = payout_service.calculate_affiliate_earnings(db, affiliate.id)
    return AffiliateEarnings(affiliate_id=affiliate.id, earnings=earnings)


@router.get("/me/referrals", response_model=List[AffiliateReferral])
def get_my_referrals(
    affiliate: AffiliateModel = Depends(get_current_affiliate),
    db: Session = Depends(get_db)
):
    return referral_service.list_affiliate_referrals(db, affiliate.id)


@router.get("/me/payouts", response_model=List[AffiliatePayout])
def get_my_payouts(
    affiliate: AffiliateModel = Depends(get_current_affiliate),
    db: Session = Depends(get_db)
):
    return payout_service.list_affiliate_payouts(db, affiliate.id)


@router.post("/me/payouts", response_model=AffiliatePayout, status_code=status.HTTP_201_CREATED)
def request_payout(
    request_data: PayoutRequest,
    affiliate: AffiliateModel = Depends(get_current_affiliate),
    db: Session = Depends(get_db)
):
    """Заявка на выплату. Создается в статусе 'pending', дальше ее ведет админ."""
    data = AffiliatePayoutCreate(affiliate_id=affiliate.id, **request_data.model_dump())
    return payout_service.create_affiliate_payout(db, data)
