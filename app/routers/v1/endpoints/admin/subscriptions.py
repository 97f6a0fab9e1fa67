# app/routers/v1/endpoints/admin/subscriptions.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.subscription import Subscription, SubscriptionCreate, SubscriptionStatusUpdate
from app.services import subscription as subscription_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Subscription, status_code=status.HTTP_201_CREATED)
def create_subscription(subscription_data: SubscriptionCreate, db: Session = Depends(get_db)):
    """[АДМИН] Оформляет подписку за пользователя (например, после оплаты у провайдера)."""
    return subscription_service.create_subscription(db, subscription_data)


@router.get("/{subscription_id}", response_model=Subscription)
def get_subscription(subscription_id: int, db: Session = Depends(get_db)):
    return subscription_service.require_subscription(db, subscription_id)


@router.put("/{subscription_id}/status", response_model=Subscription)
def update_subscription_status(
    subscription_id: int,
    status_data: SubscriptionStatusUpdate,
    db: Session = Depends(get_db)
):
    return subscription_service.update_subscription_status(db, subscription_id, status_data.status)


@router.post("/{subscription_id}/renew", response_model=Subscription)
def renew_subscription(subscription_id: int, db: Session = Depends(get_db)):
    return subscription_service.renew_subscription(db, subscription_id)
