# tests/test_analytics.py

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import NotFoundError
from app.schemas.affiliate import AffiliateCreate, AffiliatePayoutCreate
from app.schemas.referral import AffiliateReferralCreate
from app.schemas.subscription import SubscriptionCreate
from app.services import affiliate as affiliate_service
from app.services import analytics as analytics_service
from app.services import payout as payout_service
from app.services import referral as referral_service
from app.services import subscription as subscription_service
from app.utils.dates import month_start, shift_months


def _subscribe(db_session, user_id: int, level_id: int, amount: str):
    return subscription_service.create_subscription(db_session, SubscriptionCreate(
        user_id=user_id, membership_level_id=level_id, amount=Decimal(amount)
    ))


def test_dashboard_stats(db_session, test_user, admin_user, basic_level):
    affiliate = affiliate_service.create_affiliate(
        db_session, AffiliateCreate(user_id=admin_user.id, commission_rate=Decimal("0.10"))
    )
    first = _subscribe(db_session, test_user.id, basic_level.id, "9.99")
    _subscribe(db_session, admin_user.id, basic_level.id, "29.99")
    subscription_service.cancel_subscription(db_session, first.id)
    payout_service.create_affiliate_payout(db_session, AffiliatePayoutCreate(
        affiliate_id=affiliate.id, amount=Decimal("15.50"), payout_method="paypal"
    ))

    stats = analytics_service.get_dashboard_stats(db_session)

    assert stats.total_users == 2
    assert stats.total_affiliates == 1
    assert stats.total_subscriptions == 2
    assert stats.active_subscriptions == 1
    assert stats.total_revenue == Decimal("39.98")
    assert stats.monthly_revenue == Decimal("39.98")
    assert stats.pending_payouts == Decimal("15.50")


def test_dashboard_stats_on_empty_database(db_session):
    stats = analytics_service.get_dashboard_stats(db_session)

    assert stats.total_users == 0
    assert stats.total_revenue == Decimal("0")
    assert stats.pending_payouts == Decimal("0")


def test_affiliate_stats(db_session, test_user, admin_user, basic_level):
    affiliate = affiliate_service.create_affiliate(
        db_session, AffiliateCreate(user_id=admin_user.id, commission_rate=Decimal("0.10"))
    )
    affiliate_service.update_affiliate_stats(db_session, affiliate.id, earnings=Decimal("300.00"), referrals=3)
    subscription = _subscribe(db_session, test_user.id, basic_level.id, "9.99")

    converted = referral_service.create_affiliate_referral(db_session, AffiliateReferralCreate(
        affiliate_id=affiliate.id, referred_user_id=test_user.id,
        membership_purchase_id=subscription.id, commission_amount=Decimal("25.00")
    ))
    for amount in ("10.00", "5.00", "2.50"):
        referral_service.create_affiliate_referral(db_session, AffiliateReferralCreate(
            affiliate_id=affiliate.id, referred_user_id=test_user.id, commission_amount=Decimal(amount)
        ))
    referral_service.approve_referral(db_session, converted.id)

    stats = analytics_service.get_affiliate_stats(db_session, affiliate.id)

    # total_earnings берется из хранимого поля, а не из рефералов
    assert stats.total_earnings == Decimal("300.00")
    assert stats.pending_earnings == Decimal("17.50")
    assert stats.total_referrals == 4
    assert stats.conversion_rate == 25.0
    assert stats.monthly_earnings == Decimal("25.00")
    assert stats.clicks_this_month == 0


def test_affiliate_stats_without_referrals(db_session, admin_user):
    affiliate = affiliate_service.create_affiliate(
        db_session, AffiliateCreate(user_id=admin_user.id, commission_rate=Decimal("0.10"))
    )
    stats = analytics_service.get_affiliate_stats(db_session, affiliate.id)

    assert stats.total_referrals == 0
    assert stats.conversion_rate == 0.0
    assert stats.pending_earnings == Decimal("0")


def test_affiliate_stats_missing_affiliate(db_session):
    with pytest.raises(NotFoundError, match="affiliate not found"):
        analytics_service.get_affiliate_stats(db_session, 999)


def test_revenue_by_month_groups_by_creation_month(db_session, test_user, basic_level):
    current = month_start(datetime.now(timezone.utc))
    two_months_ago = shift_months(current, -2)
    long_ago = shift_months(current, -24)

    old = _subscribe(db_session, test_user.id, basic_level.id, "100.00")
    earlier = _subscribe(db_session, test_user.id, basic_level.id, "20.00")
    _subscribe(db_session, test_user.id, basic_level.id, "9.99")
    _subscribe(db_session, test_user.id, basic_level.id, "10.01")
    # Сдвигаем даты создания в прошлое
    old.created_at = long_ago.replace(day=15)
    earlier.created_at = two_months_ago.replace(day=10)
    db_session.commit()

    series = analytics_service.get_revenue_by_month(db_session, months=12)

    assert [point.month for point in series] == [
        two_months_ago.strftime("%Y-%m"),
        current.strftime("%Y-%m"),
    ]
    assert series[0].revenue == Decimal("20.00")
    assert series[1].revenue == Decimal("20.00")


def test_top_affiliates_limit(db_session, user_factory):
    first_user = user_factory("first@example.com", first_name="Ann", last_name="Lee")
    second_user = user_factory("second@example.com", first_name="Bob", last_name="Stone")
    first = affiliate_service.create_affiliate(db_session, AffiliateCreate(user_id=first_user.id, commission_rate=Decimal("0.1")))
    second = affiliate_service.create_affiliate(db_session, AffiliateCreate(user_id=second_user.id, commission_rate=Decimal("0.1")))
    affiliate_service.update_affiliate_stats(db_session, first.id, earnings=Decimal("500.00"), referrals=5)
    affiliate_service.update_affiliate_stats(db_session, second.id, earnings=Decimal("750.00"), referrals=7)

    top = analytics_service.get_top_affiliates(db_session, limit=1)

    assert len(top) == 1
    assert top[0].affiliate_id == second.id
    assert top[0].earnings == Decimal("750.00")
    assert top[0].name == "Bob Stone"
    assert top[0].referrals == 7


def test_top_affiliates_skip_inactive(db_session, admin_user):
    affiliate = affiliate_service.create_affiliate(
        db_session, AffiliateCreate(user_id=admin_user.id, commission_rate=Decimal("0.1"))
    )
    affiliate_service.deactivate_affiliate(db_session, affiliate.id)

    assert analytics_service.get_top_affiliates(db_session) == []


def _last_month_mid() -> datetime:
    return shift_months(month_start(datetime.now(timezone.utc)), -1).replace(day=15)


def test_monthly_revenue_counts_only_current_month(db_session, test_user, basic_level):
    old = _subscribe(db_session, test_user.id, basic_level.id, "12345678.91")
    _subscribe(db_session, test_user.id, basic_level.id, "0.01")
    old.created_at = _last_month_mid()
    db_session.commit()

    stats = analytics_service.get_dashboard_stats(db_session)

    assert stats.monthly_revenue == Decimal("0.01")
    assert stats.total_revenue == Decimal("12345678.92")


def test_monthly_earnings_counts_only_current_month(db_session, test_user, admin_user):
    affiliate = affiliate_service.create_affiliate(
        db_session, AffiliateCreate(user_id=admin_user.id, commission_rate=Decimal("0.10"))
    )
    old = referral_service.create_affiliate_referral(db_session, AffiliateReferralCreate(
        affiliate_id=affiliate.id, referred_user_id=test_user.id, commission_amount=Decimal("40.00")
    ))
    fresh = referral_service.create_affiliate_referral(db_session, AffiliateReferralCreate(
        affiliate_id=affiliate.id, referred_user_id=test_user.id, commission_amount=Decimal("7.50")
    ))
    referral_service.approve_referral(db_session, old.id)
    referral_service.approve_referral(db_session, fresh.id)
    old.created_at = _last_month_mid()
    db_session.commit()

    stats = analytics_service.get_affiliate_stats(db_session, affiliate.id)

    assert stats.monthly_earnings == Decimal("7.50")
    assert payout_service.calculate_affiliate_earnings(db_session, affiliate.id) == Decimal("47.50")
