# app/core/security.py

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

# bcrypt сам генерирует соль и хранит ее внутри хеша
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Хеширует пароль."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Сверяет пароль с хешем. Неизвестный формат хеша считается несовпадением."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Password hash has unknown format, treating as mismatch.")
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Создает JWT токен."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> int | None:
    """Возвращает ID пользователя из токена или None, если токен невалиден."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT Error during token decoding: {e}")
        return None

    user_id = payload.get("sub")
    if user_id is None:
        logger.warning("Token payload is missing 'sub' (user_id).")
        return None
    try:
        return int(user_id)
    except (TypeError, ValueError):
        logger.warning(f"Token 'sub' is not a valid user id: {user_id!r}")
        return None
