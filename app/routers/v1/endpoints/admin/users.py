# app/routers/v1/endpoints/admin/users.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.membership import UserMembership
from app.schemas.subscription import Subscription
from app.schemas.user import User, UserUpdate
from app.services import membership as membership_service
from app.services import subscription as subscription_service
from app.services import user as user_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[User])
def get_users_list(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """[АДМИН] Список пользователей, новые первыми."""
    return user_service.list_users(db, skip=skip, limit=limit)


@router.get("/{user_id}", response_model=User)
def get_user_details(user_id: int, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
    return user


@router.put("/{user_id}", response_model=User)
def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, user_id, user_data)


@router.post("/{user_id}/deactivate", response_model=User)
def deactivate_user(user_id: int, db: Session = Depends(get_db)):
    """
    [АДМИН] Деактивирует аккаунт. Повторный вызов ничего не ломает.
    Деактивированный пользователь не может войти.
    """
    return user_service.deactivate_user(db, user_id)


@router.get("/{user_id}/memberships", response_model=List[UserMembership])
def get_user_memberships(user_id: int, db: Session = Depends(get_db)):
    return membership_service.list_user_memberships(db, user_id)


@router.get("/{user_id}/subscriptions", response_model=List[Subscription])
def get_user_subscriptions(user_id: int, db: Session = Depends(get_db)):
    return subscription_service.list_user_subscriptions(db, user_id)
