# app/dependencies.py

import logging
from typing import Optional, Iterator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.security import decode_access_token
from app.db.session import SessionLocal
from app.models.user import User
from app.services import auth as auth_service

# --- Инициализация логгера ---
logger = logging.getLogger(__name__)

# --- Схемы аутентификации ---
strict_bearer_scheme = HTTPBearer(auto_error=True)
optional_bearer_scheme = HTTPBearer(auto_error=False)

# --- Управление сессией БД ---
def get_db() -> Iterator[Session]:
    """
    Основная зависимость FastAPI для получения сессии БД.
    Это генератор, который корректно работает с `Depends`.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# --- Зависимости аутентификации и авторизации ---

def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(strict_bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    ОБЯЗАТЕЛЬНАЯ зависимость.
    Требует валидный токен. Если его нет или он невалиден - 401.
    Деактивированный аккаунт - 403 (из auth_service).
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise credentials_exception

    try:
        user = auth_service.get_current_user(db, user_id)
    except NotFoundError:
        logger.warning(f"User with ID {user_id} from token not found in DB.")
        raise credentials_exception

    request.state.user = user
    logger.debug(f"Successfully authenticated user ID: {user.id}")
    return user


def get_optional_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    ОПЦИОНАЛЬНАЯ зависимость.
    Нет токена, токен невалиден или аккаунт деактивирован - работаем как с анонимом.
    """
    if not credentials:
        return None

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.is_active:
        logger.warning(f"Optional user with ID {user_id} from token is missing or inactive.")
        return None

    request.state.user = user
    return user


def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Зависимость для защиты админских эндпоинтов.
    Проверяет флаг is_admin у текущего пользователя.
    """
    if not current_user.is_admin:
        logger.warning(f"Permission denied for user {current_user.id}: not an admin.")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to access this resource."
        )
    return current_user
