# app/services/user.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud import user as crud_user
from app.models.user import User
from app.schemas.user import UserUpdate
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User | None:
    return crud_user.get_user_by_id(db, user_id)

def require_user(db: Session, user_id: int) -> User:
    """Предусловие для всех операций, ссылающихся на пользователя."""
    user = crud_user.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("user not found")
    return user

def list_users(db: Session, skip: int = 0, limit: int = 100) -> list[User]:
    return crud_user.get_users(db, skip=skip, limit=limit)

def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    user = require_user(db, user_id)
    user = crud_user.update_user(db, user, data, now=utcnow())
    logger.info(f"Updated profile of user {user.id}: fields={sorted(data.model_fields_set)}")
    return user

def deactivate_user(db: Session, user_id: int) -> User:
    """Мягкое удаление. Повторный вызов для уже деактивированного пользователя - не ошибка."""
    user = require_user(db, user_id)
    user = crud_user.deactivate_user(db, user, now=utcnow())
    logger.info(f"User {user.id} deactivated.")
    return user
