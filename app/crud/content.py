# app/crud/content.py
from datetime import datetime
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.content import Content
from app.schemas.content import ContentCreate, ContentUpdate


def _visible_to(query, level_id: int | None):
    """
    Фильтр видимости: только опубликованное; без уровня - только бесплатное,
    с уровнем - бесплатное плюс контент ровно этого уровня (без иерархии).
    """
    query = query.filter(Content.is_published == True)
    if level_id is None:
        return query.filter(Content.required_membership_level_id.is_(None))
    return query.filter(or_(
        Content.required_membership_level_id.is_(None),
        Content.required_membership_level_id == level_id
    ))

def get_visible_content(db: Session, level_id: int | None) -> list[Content]:
    return _visible_to(db.query(Content), level_id).order_by(
        Content.created_at.desc(), Content.id.desc()
    ).all()

def get_visible_content_by_id(db: Session, content_id: int, level_id: int | None) -> Content | None:
    return _visible_to(db.query(Content), level_id).filter(Content.id == content_id).first()

def get_content_by_id(db: Session, content_id: int) -> Content | None:
    return db.query(Content).filter(Content.id == content_id).first()

def get_all_content(db: Session) -> list[Content]:
    """Весь контент, включая неопубликованный (для админки)."""
    return db.query(Content).order_by(Content.created_at.desc(), Content.id.desc()).all()

def create_content(db: Session, data: ContentCreate) -> Content:
    db_content = Content(**data.model_dump())
    db.add(db_content)
    db.commit()
    db.refresh(db_content)
    return db_content

def update_content(db: Session, content: Content, data: ContentUpdate, now: datetime) -> Content:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(content, field, value)
    content.updated_at = now
    db.commit()
    db.refresh(content)
    return content

def delete_content(db: Session, content: Content) -> None:
    """Жесткое удаление, в отличие от остальных сущностей."""
    db.delete(content)
    db.commit()
