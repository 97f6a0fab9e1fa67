# app/routers/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_current_user, get_db
from app.models.user import User as UserModel
from app.schemas.user import AuthResponse, LoginData, User, UserCreate
from app.services import auth as auth_service

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(data: UserCreate, db: Session = Depends(get_db)):
    """Регистрация нового пользователя по email и паролю."""
    return auth_service.register_user(db, data)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginData, db: Session = Depends(get_db)):
    """Вход по email/паролю, возвращает JWT."""
    return auth_service.login_user(db, data)


@router.get("/me", response_model=User)
def read_current_user(current_user: UserModel = Depends(get_current_user)):
    return current_user
