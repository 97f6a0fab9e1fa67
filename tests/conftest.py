# tests/conftest.py
import os

# Настройки читаются при импорте app.*, поэтому окружение задаем до него
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

from datetime import timedelta
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, get_password_hash
from app.db.session import Base
from app.dependencies import get_db
from app.main import app
from app.models import affiliate, content, membership, referral, subscription, user # Импортируем все модели для создания таблиц
from app.models.membership import MembershipLevel
from app.models.user import User

# In-memory SQLite для тестов. StaticPool - одно соединение на все потоки,
# иначе синхронные эндпоинты из threadpool увидят пустую базу.
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Фикстура для создания чистой базы данных для каждого теста.
    """
    Base.metadata.create_all(bind=engine) # Создаем все таблицы
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine) # Очищаем все после теста


def make_user(db: Session, email: str, password: str = "password123", is_admin: bool = False, **kwargs) -> User:
    db_user = User(
        email=email,
        password_hash=get_password_hash(password),
        first_name=kwargs.pop("first_name", "Test"),
        last_name=kwargs.pop("last_name", "User"),
        is_admin=is_admin,
        **kwargs
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


@pytest.fixture
def test_user(db_session) -> User:
    return make_user(db_session, "member@example.com", first_name="Jane", last_name="Doe")


@pytest.fixture
def admin_user(db_session) -> User:
    return make_user(db_session, "admin@example.com", is_admin=True, first_name="Admin", last_name="Root")


@pytest.fixture
def basic_level(db_session) -> MembershipLevel:
    level = MembershipLevel(
        name="Basic", description="Basic access", price=Decimal("9.99"),
        duration_days=30, features=["articles"], is_active=True
    )
    db_session.add(level)
    db_session.commit()
    db_session.refresh(level)
    return level


@pytest.fixture
def premium_level(db_session) -> MembershipLevel:
    level = MembershipLevel(
        name="Premium", description="Everything", price=Decimal("29.99"),
        duration_days=365, features=["articles", "videos", "courses"], is_active=True
    )
    db_session.add(level)
    db_session.commit()
    db_session.refresh(level)
    return level


def auth_headers_for(db_user: User) -> dict:
    token = create_access_token(data={"sub": str(db_user.id)}, expires_delta=timedelta(minutes=15))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_auth_headers(test_user) -> dict:
    return auth_headers_for(test_user)


@pytest.fixture
def admin_auth_headers(admin_user) -> dict:
    return auth_headers_for(admin_user)


@pytest_asyncio.fixture
async def client(db_session):
    """HTTP-клиент к приложению; get_db подменен на тестовую сессию."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as async_client:
        yield async_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_factory(db_session):
    """Создает дополнительных пользователей: user_factory("a@b.c", first_name=...)."""
    def _make(email: str, **kwargs) -> User:
        return make_user(db_session, email, **kwargs)
    return _make
