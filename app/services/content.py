# app/services/content.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import content as crud_content
from app.crud import membership_level as crud_level
from app.models.content import Content
from app.schemas.content import ContentCreate, ContentUpdate
from app.services import membership as membership_service
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


def _caller_level_id(db: Session, caller_user_id: int | None) -> int | None:
    """Уровень, открывающий доступ вызывающему: None для анонима и для пользователя без членства."""
    if caller_user_id is None:
        return None
    membership = membership_service.resolve_active_membership(db, caller_user_id)
    return membership.membership_level_id if membership else None

def _validate_required_level(db: Session, level_id: int | None) -> None:
    if level_id is not None and not crud_level.get_membership_level_by_id(db, level_id):
        raise ValidationError("membership level not found")


def list_visible_content(db: Session, caller_user_id: int | None = None) -> list[Content]:
    """Опубликованный контент, доступный вызывающему, от новых к старым."""
    level_id = _caller_level_id(db, caller_user_id)
    return crud_content.get_visible_content(db, level_id)

def get_visible_content(db: Session, content_id: int, caller_user_id: int | None = None) -> Content | None:
    """
    None и для "нет такого", и для "нет доступа" - снаружи эти случаи
    неразличимы, чтобы нельзя было перебирать ID закрытого контента.
    """
    level_id = _caller_level_id(db, caller_user_id)
    return crud_content.get_visible_content_by_id(db, content_id, level_id)

def list_all_content(db: Session) -> list[Content]:
    return crud_content.get_all_content(db)

def get_content(db: Session, content_id: int) -> Content | None:
    return crud_content.get_content_by_id(db, content_id)

def create_content(db: Session, data: ContentCreate) -> Content:
    _validate_required_level(db, data.required_membership_level_id)
    content = crud_content.create_content(db, data)
    logger.info(f"Created content {content.id} '{content.title}' (level={content.required_membership_level_id}, published={content.is_published})")
    return content

def update_content(db: Session, content_id: int, data: ContentUpdate) -> Content:
    content = crud_content.get_content_by_id(db, content_id)
    if not content:
        raise NotFoundError("content not found")
    if "required_membership_level_id" in data.model_fields_set:
        _validate_required_level(db, data.required_membership_level_id)
    content = crud_content.update_content(db, content, data, now=utcnow())
    logger.info(f"Updated content {content.id}: fields={sorted(data.model_fields_set)}")
    return content

def delete_content(db: Session, content_id: int) -> None:
    content = crud_content.get_content_by_id(db, content_id)
    if not content:
        raise NotFoundError("content not found")
    crud_content.delete_content(db, content)
    logger.info(f"Deleted content {content_id}.")
