# app/routers/v1/endpoints/admin/payouts.py

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.affiliate import AffiliatePayout, AffiliatePayoutCreate, PayoutStatusUpdate
from app.services import payout as payout_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AffiliatePayout, status_code=status.HTTP_201_CREATED)
def create_payout(payout_data: AffiliatePayoutCreate, db: Session = Depends(get_db)):
    return payout_service.create_affiliate_payout(db, payout_data)


@router.get("/pending", response_model=List[AffiliatePayout])
def get_pending_payouts(db: Session = Depends(get_db)):
    return payout_service.list_pending_payouts(db)


@router.get("/{payout_id}", response_model=AffiliatePayout)
def get_payout(payout_id: int, db: Session = Depends(get_db)):
    return payout_service.require_payout(db, payout_id)


@router.post("/{payout_id}/process", response_model=AffiliatePayout)
def process_payout(payout_id: int, db: Session = Depends(get_db)):
    """[АДМИН] Берет выплату в работу ('processing')."""
    return payout_service.process_payout(db, payout_id)


@router.put("/{payout_id}/status", response_model=AffiliatePayout)
def update_payout_status(
    payout_id: int,
    status_data: PayoutStatusUpdate,
    db: Session = Depends(get_db)
):
    return payout_service.update_payout_status(db, payout_id, status_data.status)
