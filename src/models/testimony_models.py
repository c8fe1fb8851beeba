from typing import Optional, List, Dict, Any
import uuid
from datetime import datetime

# SQLAlchemy imports
from sqlalchemy import String, Integer, ForeignKey, DateTime, Text, JSON, Boolean
from sqlalchemy import orm
from sqlalchemy.orm import Mapped, mapped_column

# Import the Base class from database module
from src.database import Base

from src.utils.custom_utils import utcnow

# Constants for repeated values
CASCADE_ALL_DELETE_ORPHAN = "all, delete-orphan"
TESTIMONIES_ID_FK = "testimonies.id"
IMAGES_ID_FK = "images.id"


class Testimony(Base):
    """
    SQLAlchemy model for a single memorial testimony.
    """
    __tablename__ = "testimonies"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    relationship: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False)
    page: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    chapter: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    tags: Mapped[List[str]] = mapped_column(JSON, default=list)
    page_range: Mapped[Optional[Dict[str, Any]]] = mapped_column("page_range", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    image_links = orm.relationship(
        "TestimonyImage",
        back_populates="testimony",
        cascade=CASCADE_ALL_DELETE_ORPHAN,
        order_by="TestimonyImage.order",
    )


class Image(Base):
    """
    SQLAlchemy model for image metadata, parsed from the magazine filename convention.
    """
    __tablename__ = "images"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    path: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    filename: Mapped[str] = mapped_column(Text, nullable=False)
    page: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_modified: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_page_based: Mapped[bool] = mapped_column(Boolean, default=False)
    section_title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    section_page: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    photo_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    testimony_links = orm.relationship("TestimonyImage", back_populates="image", cascade=CASCADE_ALL_DELETE_ORPHAN)


class TestimonyImage(Base):
    """
    Association between a testimony and an image, with a per-testimony caption and order.
    """
    __tablename__ = "testimony_images"

    testimony_id: Mapped[str] = mapped_column(ForeignKey(TESTIMONIES_ID_FK, ondelete="CASCADE"), primary_key=True)
    image_id: Mapped[uuid.UUID] = mapped_column(ForeignKey(IMAGES_ID_FK, ondelete="CASCADE"), primary_key=True)
    caption: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    testimony = orm.relationship("Testimony", back_populates="image_links")
    image = orm.relationship("Image", back_populates="testimony_links")
