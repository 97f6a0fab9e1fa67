# app/routers/v1/endpoints/admin/content.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.content import Content, ContentCreate, ContentUpdate
from app.services import content as content_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Content])
def get_all_content(db: Session = Depends(get_db)):
    """[АДМИН] Весь контент, включая неопубликованный."""
    return content_service.list_all_content(db)


@router.get("/{content_id}", response_model=Content)
def get_content_item(content_id: int, db: Session = Depends(get_db)):
    content = content_service.get_content(db, content_id)
    if not content:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="content not found")
    return content


@router.post("", response_model=Content, status_code=status.HTTP_201_CREATED)
def create_content(content_data: ContentCreate, db: Session = Depends(get_db)):
    return content_service.create_content(db, content_data)


@router.put("/{content_id}", response_model=Content)
def update_content(content_id: int, content_data: ContentUpdate, db: Session = Depends(get_db)):
    """[АДМИН] Частичное обновление, в т.ч. публикация (is_published=true)."""
    return content_service.update_content(db, content_id, content_data)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_content(content_id: int, db: Session = Depends(get_db)):
    """[АДМИН] Безвозвратно удаляет элемент контента."""
    content_service.delete_content(db, content_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
