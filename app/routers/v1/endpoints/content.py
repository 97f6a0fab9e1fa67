# app/routers/v1/endpoints/content.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.dependencies import get_db, get_optional_current_user
from app.models.user import User
from app.schemas.content import Content
from app.services import content as content_service

router = APIRouter()


def _caller_id(user: Optional[User]) -> int | None:
    return user.id if user else None


@router.get("/content", response_model=List[Content])
def get_content_list(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_current_user)
):
    """
    Контент, доступный вызывающему. Без токена - только бесплатный,
    с токеном - бесплатный плюс контент уровня его действующего членства.
    """
    return content_service.list_visible_content(db, _caller_id(current_user))


@router.get("/content/{content_id}", response_model=Content)
def get_content_item(
    content_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_current_user)
):
    content = content_service.get_visible_content(db, content_id, _caller_id(current_user))
    if not content:
        # Одинаковый ответ для "нет такого" и "нет доступа"
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="content not found")
    return content
