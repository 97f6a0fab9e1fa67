# tests/test_memberships.py

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.membership import MembershipLevelCreate, MembershipLevelUpdate, UserMembershipCreate
from app.services import membership as membership_service


def test_create_and_update_membership_level(db_session):
    level = membership_service.create_membership_level(db_session, MembershipLevelCreate(
        name="Gold", price=Decimal("29.99"), duration_days=30, features=["videos", "courses"]
    ))
    assert level.price == Decimal("29.99")
    assert level.features == ["videos", "courses"]

    updated = membership_service.update_membership_level(
        db_session, level.id, MembershipLevelUpdate(is_active=False)
    )
    assert updated.is_active is False
    assert updated.name == "Gold"


def test_list_membership_levels_active_only(db_session, basic_level, premium_level):
    membership_service.update_membership_level(db_session, premium_level.id, MembershipLevelUpdate(is_active=False))

    active_ids = [level.id for level in membership_service.list_membership_levels(db_session, active_only=True)]
    all_ids = [level.id for level in membership_service.list_membership_levels(db_session)]

    assert active_ids == [basic_level.id]
    assert set(all_ids) == {basic_level.id, premium_level.id}


def test_create_user_membership_defaults_to_level_duration(db_session, test_user, basic_level):
    membership = membership_service.create_user_membership(
        db_session, UserMembershipCreate(user_id=test_user.id, membership_level_id=basic_level.id)
    )

    assert membership.is_active is True
    assert membership.end_date - membership.start_date == timedelta(days=30)


def test_create_user_membership_checks_user_before_level(db_session, basic_level):
    with pytest.raises(NotFoundError, match="user not found"):
        membership_service.create_user_membership(
            db_session, UserMembershipCreate(user_id=999, membership_level_id=999)
        )


def test_create_user_membership_missing_level(db_session, test_user):
    with pytest.raises(NotFoundError, match="membership level not found"):
        membership_service.create_user_membership(
            db_session, UserMembershipCreate(user_id=test_user.id, membership_level_id=999)
        )


def test_create_user_membership_rejects_inverted_dates(db_session, test_user, basic_level):
    start = datetime(2024, 1, 31, tzinfo=timezone.utc)
    with pytest.raises(ValidationError):
        membership_service.create_user_membership(db_session, UserMembershipCreate(
            user_id=test_user.id, membership_level_id=basic_level.id,
            start_date=start, end_date=start - timedelta(days=1)
        ))


def test_resolve_active_membership_ignores_expired_and_future(db_session, test_user, basic_level, premium_level):
    now = datetime.now(timezone.utc)
    # Истекшее
    membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=premium_level.id,
        start_date=now - timedelta(days=60), end_date=now - timedelta(days=30)
    ))
    # Еще не начавшееся
    membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=premium_level.id,
        start_date=now + timedelta(days=1), end_date=now + timedelta(days=31)
    ))
    assert membership_service.resolve_active_membership(db_session, test_user.id) is None

    current = membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=basic_level.id,
        start_date=now - timedelta(days=1), end_date=now + timedelta(days=29)
    ))
    active = membership_service.resolve_active_membership(db_session, test_user.id)
    assert active is not None
    assert active.id == current.id
    assert active.membership_level_id == basic_level.id


def test_resolve_active_membership_prefers_latest_started(db_session, test_user, basic_level, premium_level):
    now = datetime.now(timezone.utc)
    membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=basic_level.id,
        start_date=now - timedelta(days=10), end_date=now + timedelta(days=20)
    ))
    latest = membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=premium_level.id,
        start_date=now - timedelta(days=2), end_date=now + timedelta(days=20)
    ))

    assert membership_service.resolve_active_membership(db_session, test_user.id).id == latest.id


def test_expire_membership_removes_access(db_session, test_user, basic_level):
    membership = membership_service.create_user_membership(
        db_session, UserMembershipCreate(user_id=test_user.id, membership_level_id=basic_level.id)
    )
    expired = membership_service.expire_membership(db_session, membership.id)

    assert expired.is_active is False
    assert membership_service.resolve_active_membership(db_session, test_user.id) is None
    # История сохраняется
    assert len(membership_service.list_user_memberships(db_session, test_user.id)) == 1


def test_expire_missing_membership_not_found(db_session):
    with pytest.raises(NotFoundError, match="membership not found"):
        membership_service.expire_membership(db_session, 404)


def test_active_membership_window_includes_both_ends(db_session, test_user, basic_level, mocker):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = datetime(2024, 1, 31, tzinfo=timezone.utc)
    membership = membership_service.create_user_membership(db_session, UserMembershipCreate(
        user_id=test_user.id, membership_level_id=basic_level.id, start_date=start, end_date=end
    ))

    mocker.patch("app.services.membership.utcnow", return_value=end)
    assert membership_service.resolve_active_membership(db_session, test_user.id).id == membership.id

    mocker.patch("app.services.membership.utcnow", return_value=start)
    assert membership_service.resolve_active_membership(db_session, test_user.id).id == membership.id

    mocker.patch("app.services.membership.utcnow", return_value=end + timedelta(seconds=1))
    assert membership_service.resolve_active_membership(db_session, test_user.id) is None
