"""
SQLAlchemy models for the reminiscence memory system.
Defines the tables read and written by the life story engine.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Index,
    String,
    Text,
    DateTime,
    ForeignKey,
    JSON,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Resident(Base):
    """Resident table - owned by resident-profile management, read here for names."""

    __tablename__ = "residents"

    id = Column(String(64), primary_key=True)
    first_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Relationships
    profile = relationship("ResidentProfile", back_populates="resident", uselist=False)

    def __repr__(self):
        return f"<Resident(id={self.id}, first_name='{self.first_name}')>"


class ResidentProfile(Base):
    """Questionnaire answers for a resident."""

    __tablename__ = "resident_profiles"

    id = Column(String(64), primary_key=True)
    resident_id = Column(String(64), ForeignKey("residents.id"), unique=True, nullable=False, index=True)
    birthplace = Column(String(255), nullable=True)
    occupation = Column(String(255), nullable=True)
    previous_occupation = Column(String(255), nullable=True)
    hobbies = Column(JSON, nullable=True)  # list of strings, questionnaire order

    # Relationships
    resident = relationship("Resident", back_populates="profile")

    def __repr__(self):
        return f"<ResidentProfile(resident_id={self.resident_id}, birthplace='{self.birthplace}')>"


class LifeLog(Base):
    """
    Owner-scoped log rows. Life stories are rows with type LIFE_STORY whose
    payload carries residentSaid / wardaResponse / tags / capturedAt.
    Rows are only ever inserted and read.
    """

    __tablename__ = "life_logs"
    __table_args__ = (
        Index("idx_life_logs_user_type_created", "user_id", "type", "created_at"),
    )

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    type = Column(String(50), nullable=False)  # record-type discriminator, e.g. "LIFE_STORY"
    value = Column(String(100), nullable=False)  # short label, e.g. "story_captured"
    payload = Column(JSON, nullable=False)
    recorded_by = Column(String(100), nullable=False)  # attribution, e.g. "warda-ai"
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<LifeLog(user_id={self.user_id}, type='{self.type}', value='{self.value}')>"
