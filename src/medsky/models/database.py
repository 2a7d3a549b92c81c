"""Database models for MedSky."""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CaseStudyRecord(Base):
    """A saved case study, owned by one user."""
    
    __tablename__ = 'case_studies'
    
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False)
    owner_id = Column(String(128), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)
    correct_answer = Column(Text, nullable=False)
    explanation = Column(Text, nullable=False)
    disease_field = Column(String(64), nullable=False)
    
    __table_args__ = (
        Index('ix_case_studies_owner_id', 'owner_id'),
    )
    
    def __repr__(self):
        return f"<CaseStudyRecord(id='{self.id}', owner_id='{self.owner_id}', field='{self.disease_field}')>"
