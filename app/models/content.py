# app/models/content.py
from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, func

from app.db.session import Base

CONTENT_TYPES = ("article", "video", "course", "download")

class Content(Base):
    __tablename__ = "content"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # 'article', 'video', 'course', 'download'
    content_type = Column(String, nullable=False)
    content_url = Column(String, nullable=True)
    content_body = Column(Text, nullable=True)

    # NULL - бесплатный контент, иначе доступен только держателям ровно этого уровня
    required_membership_level_id = Column(Integer, ForeignKey("membership_levels.id"), nullable=True)
    is_published = Column(Boolean, default=False, nullable=False, server_default='false')

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
