# app/services/auth.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.crud import user as crud_user
from app.models.user import User
from app.schemas.user import AuthResponse, LoginData, UserCreate
from app.schemas.user import User as UserSchema

logger = logging.getLogger(__name__)


def register_user(db: Session, data: UserCreate) -> User:
    """Регистрация по email/паролю. Email должен быть уникальным."""
    if crud_user.get_user_by_email(db, email=data.email):
        raise ConflictError("User with this email already exists")

    try:
        db_user = crud_user.create_user(
            db,
            email=data.email,
            password_hash=get_password_hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
        )
    except IntegrityError:
        # Параллельная регистрация того же email успела раньше нас
        db.rollback()
        raise ConflictError("User with this email already exists")

    logger.info(f"Registered new user {db_user.id}.")
    return db_user


def login_user(db: Session, data: LoginData) -> AuthResponse:
    """Проверяет учетные данные и выдает JWT."""
    db_user = crud_user.get_user_by_email(db, email=data.email)
    if not db_user:
        raise UnauthorizedError("Invalid email or password")

    # Деактивацию проверяем раньше пароля
    if not db_user.is_active:
        raise ForbiddenError("Account is deactivated")

    if not verify_password(data.password, db_user.password_hash):
        raise UnauthorizedError("Invalid email or password")

    access_token = create_access_token(data={"sub": str(db_user.id)})
    logger.info(f"User {db_user.id} logged in.")
    return AuthResponse(access_token=access_token, user=UserSchema.model_validate(db_user))


def get_current_user(db: Session, user_id: int) -> User:
    db_user = crud_user.get_user_by_id(db, user_id)
    if not db_user:
        raise NotFoundError("User not found")
    if not db_user.is_active:
        raise ForbiddenError("Account is deactivated")
    return db_user
