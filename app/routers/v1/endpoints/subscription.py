# app/routers/v1/endpoints/subscription.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.dependencies import get_current_user, get_db
from app.models.subscription import Subscription as SubscriptionModel
from app.models.user import User
from app.schemas.subscription import Subscription, SubscriptionCreate, SubscriptionRequest
from app.services import subscription as subscription_service

router = APIRouter(prefix="/subscriptions")


def _get_own_subscription(db: Session, subscription_id: int, user: User) -> SubscriptionModel:
    """Чужие подписки для пользователя не существуют."""
    subscription = subscription_service.require_subscription(db, subscription_id)
    if subscription.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="subscription not found")
    return subscription


@router.post("", response_model=Subscription, status_code=status.HTTP_201_CREATED)
def create_subscription(
    request_data: SubscriptionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    data = SubscriptionCreate(user_id=current_user.id, **request_data.model_dump())
    return subscription_service.create_subscription(db, data)


@router.get("/me", response_model=List[Subscription])
def get_my_subscriptions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return subscription_service.list_user_subscriptions(db, current_user.id)


@router.get("/me/active", response_model=Optional[Subscription])
def get_my_active_subscription(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return subscription_service.get_active_subscription(db, current_user.id)


@router.post("/{subscription_id}/cancel", response_model=Subscription)
def cancel_my_subscription(
    subscription_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    _get_own_subscription(db, subscription_id, current_user)
    return subscription_service.cancel_subscription(db, subscription_id)


@router.post("/{subscription_id}/renew", response_model=Subscription)
def renew_my_subscription(
    subscription_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    _get_own_subscription(db, subscription_id, current_user)
    return subscription_service.renew_subscription(db, subscription_id)
