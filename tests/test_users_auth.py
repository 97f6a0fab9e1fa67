# tests/test_users_auth.py

import pytest

from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from app.core.security import create_access_token, decode_access_token, verify_password
from app.schemas.user import LoginData, UserCreate, UserUpdate
from app.services import auth as auth_service
from app.services import user as user_service


def test_register_user_hashes_password(db_session):
    data = UserCreate(email="new@example.com", password="supersecret", first_name="New", last_name="Member")
    db_user = auth_service.register_user(db_session, data)

    assert db_user.id is not None
    assert db_user.is_active is True
    assert db_user.is_admin is False
    assert db_user.password_hash != "supersecret"
    assert verify_password("supersecret", db_user.password_hash)


def test_register_duplicate_email_conflicts(db_session, test_user):
    data = UserCreate(email=test_user.email, password="supersecret", first_name="Dup", last_name="User")
    with pytest.raises(ConflictError):
        auth_service.register_user(db_session, data)


def test_login_returns_token_for_user(db_session, test_user):
    response = auth_service.login_user(db_session, LoginData(email=test_user.email, password="password123"))

    assert response.token_type == "bearer"
    assert response.user.id == test_user.id
    assert decode_access_token(response.access_token) == test_user.id


def test_login_wrong_password_unauthorized(db_session, test_user):
    with pytest.raises(UnauthorizedError):
        auth_service.login_user(db_session, LoginData(email=test_user.email, password="wrong-password"))


def test_login_unknown_email_unauthorized(db_session):
    with pytest.raises(UnauthorizedError):
        auth_service.login_user(db_session, LoginData(email="ghost@example.com", password="password123"))


def test_login_deactivated_forbidden_even_with_wrong_password(db_session, test_user):
    user_service.deactivate_user(db_session, test_user.id)
    # Деактивация проверяется раньше пароля
    with pytest.raises(ForbiddenError):
        auth_service.login_user(db_session, LoginData(email=test_user.email, password="wrong-password"))


def test_get_current_user_checks_existence_and_activity(db_session, test_user):
    assert auth_service.get_current_user(db_session, test_user.id).id == test_user.id

    with pytest.raises(NotFoundError):
        auth_service.get_current_user(db_session, 9999)

    user_service.deactivate_user(db_session, test_user.id)
    with pytest.raises(ForbiddenError):
        auth_service.get_current_user(db_session, test_user.id)


def test_deactivate_user_is_idempotent(db_session, test_user):
    first = user_service.deactivate_user(db_session, test_user.id)
    assert first.is_active is False

    second = user_service.deactivate_user(db_session, test_user.id)
    assert second.is_active is False
    assert second.id == test_user.id


def test_deactivate_missing_user_not_found(db_session):
    with pytest.raises(NotFoundError, match="user not found"):
        user_service.deactivate_user(db_session, 12345)


def test_update_user_changes_only_supplied_fields(db_session, test_user):
    updated = user_service.update_user(db_session, test_user.id, UserUpdate(phone="+100200300"))

    assert updated.phone == "+100200300"
    assert updated.first_name == "Jane"
    assert updated.last_name == "Doe"


def test_update_user_rejects_null_name():
    with pytest.raises(ValueError):
        UserUpdate(first_name=None)


def test_decode_token_with_non_numeric_subject():
    token = create_access_token(data={"sub": "not-a-user-id"})
    assert decode_access_token(token) is None


def test_validation_error_maps_to_422():
    assert ValidationError("membership level not found").status_code == 422
