# app/services/membership.py
import logging
from datetime import timedelta
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import membership_level as crud_level
from app.crud import user_membership as crud_membership
from app.models.membership import MembershipLevel, UserMembership
from app.schemas.membership import MembershipLevelCreate, MembershipLevelUpdate, UserMembershipCreate
from app.services import user as user_service
from app.utils.dates import as_utc, utcnow

logger = logging.getLogger(__name__)

# --- Уровни членства ---

def list_membership_levels(db: Session, active_only: bool = False) -> list[MembershipLevel]:
    return crud_level.get_membership_levels(db, active_only=active_only)

def get_membership_level(db: Session, level_id: int) -> MembershipLevel | None:
    return crud_level.get_membership_level_by_id(db, level_id)

def require_membership_level(db: Session, level_id: int) -> MembershipLevel:
    level = crud_level.get_membership_level_by_id(db, level_id)
    if not level:
        raise NotFoundError("membership level not found")
    return level

def create_membership_level(db: Session, data: MembershipLevelCreate) -> MembershipLevel:
    level = crud_level.create_membership_level(db, data)
    logger.info(f"Created membership level {level.id} '{level.name}' ({level.price} / {level.duration_days} days)")
    return level

def update_membership_level(db: Session, level_id: int, data: MembershipLevelUpdate) -> MembershipLevel:
    level = require_membership_level(db, level_id)
    level = crud_level.update_membership_level(db, level, data)
    logger.info(f"Updated membership level {level.id}: fields={sorted(data.model_fields_set)}")
    return level

# --- Членства пользователей ---

def list_user_memberships(db: Session, user_id: int) -> list[UserMembership]:
    return crud_membership.get_user_memberships(db, user_id)

def create_user_membership(db: Session, data: UserMembershipCreate) -> UserMembership:
    """
    Выдает пользователю членство.
    Без явных дат период начинается сейчас и длится duration_days уровня.
    """
    user_service.require_user(db, data.user_id)
    level = require_membership_level(db, data.membership_level_id)

    start_date = as_utc(data.start_date) if data.start_date else utcnow()
    end_date = as_utc(data.end_date) if data.end_date else start_date + timedelta(days=level.duration_days)
    if end_date <= start_date:
        raise ValidationError("membership end_date must be after start_date")

    membership = crud_membership.create_user_membership(
        db, user_id=data.user_id, membership_level_id=level.id,
        start_date=start_date, end_date=end_date
    )
    logger.info(f"Granted membership {membership.id} (level {level.id}) to user {data.user_id} until {end_date.isoformat()}")
    return membership

def resolve_active_membership(db: Session, user_id: int) -> UserMembership | None:
    """
    Действующее членство пользователя, которое определяет доступ к контенту.
    Несколько одновременно действующих членств возможны - см. crud.get_active_membership.
    """
    return crud_membership.get_active_membership(db, user_id, now=utcnow())

def expire_membership(db: Session, membership_id: int) -> UserMembership:
    membership = crud_membership.get_membership_by_id(db, membership_id)
    if not membership:
        raise NotFoundError("membership not found")
    membership = crud_membership.expire_membership(db, membership, now=utcnow())
    logger.info(f"Membership {membership.id} of user {membership.user_id} expired.")
    return membership
