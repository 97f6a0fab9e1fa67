# app/crud/user.py
from datetime import datetime
from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import UserUpdate


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Получает пользователя по его первичному ключу."""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()

def create_user(
    db: Session,
    email: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    phone: str | None = None
) -> User:
    """Создает нового пользователя в нашей БД."""
    db_user = User(
        email=email,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        phone=phone
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

def get_users(db: Session, skip: int = 0, limit: int = 100) -> list[User]:
    """Список пользователей для админки (от новых к старым)."""
    return db.query(User).order_by(User.id.desc()).offset(skip).limit(limit).all()

def count_all_users(db: Session) -> int:
    return db.query(User).count()

def update_user(db: Session, user: User, data: UserUpdate, now: datetime) -> User:
    """Применяет к пользователю только явно переданные поля."""
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    user.updated_at = now
    db.commit()
    db.refresh(user)
    return user

def deactivate_user(db: Session, user: User, now: datetime) -> User:
    user.is_active = False
    user.updated_at = now
    db.commit()
    db.refresh(user)
    return user
