# app/routers/v1/endpoints/user.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies import get_current_user, get_db
from app.models.user import User as UserModel
from app.schemas.user import User, UserUpdate
from app.services import user as user_service

router = APIRouter()


@router.get("/users/me", response_model=User)
def read_users_me(current_user: UserModel = Depends(get_current_user)):
    return current_user


@router.put("/users/me", response_model=User)
def update_users_me(
    user_update_data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user)
):
    """Обновление профиля текущего пользователя (только переданные поля)."""
    return user_service.update_user(db, current_user.id, user_update_data)
