"""Case-study stores.

Two implementations of the ``CaseStudyRepository`` protocol:

- ``InMemoryCaseStudyRepository`` for development and tests
- ``SqlAlchemyCaseStudyRepository`` for any SQLAlchemy-supported database

Both assign an opaque id on ``add`` and return records in insertion order.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from medsky.core.errors import PersistenceError
from medsky.models.database import Base, CaseStudyRecord
from medsky.models.domain import CaseStudy

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class InMemoryCaseStudyRepository:
    """Process-local store keyed by owner, then by case id."""

    def __init__(self):
        self._records: Dict[str, "OrderedDict[str, CaseStudy]"] = {}
        self._lock = threading.Lock()

    def add(self, owner_id: str, case_study: CaseStudy) -> CaseStudy:
        saved = case_study.model_copy(update={
            "id": _new_id(),
            "owner_id": owner_id,
            "created_at": datetime.now(timezone.utc),
        })
        with self._lock:
            self._records.setdefault(owner_id, OrderedDict())[saved.id] = saved
        logger.debug(f"Stored case study {saved.id} for owner {owner_id}")
        return saved

    def list_for_owner(self, owner_id: str) -> List[CaseStudy]:
        with self._lock:
            return list(self._records.get(owner_id, {}).values())

    def get(self, owner_id: str, case_id: str) -> Optional[CaseStudy]:
        with self._lock:
            return self._records.get(owner_id, {}).get(case_id)

    def delete(self, owner_id: str, case_id: str) -> bool:
        with self._lock:
            owned = self._records.get(owner_id)
            if not owned or case_id not in owned:
                return False
            del owned[case_id]
        logger.debug(f"Deleted case study {case_id} for owner {owner_id}")
        return True


class SqlAlchemyCaseStudyRepository:
    """Case-study store backed by a relational database."""

    def __init__(self, database_url: str, create_tables: bool = True):
        """Initialize the engine and session factory.

        Args:
            database_url: SQLAlchemy database URL
            create_tables: Create the ``case_studies`` table if missing
        """
        engine_kwargs = {"pool_pre_ping": True}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
                engine_kwargs["poolclass"] = StaticPool

        try:
            self._engine = create_engine(database_url, **engine_kwargs)
            self._SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
            if create_tables:
                Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to initialize database: {e}",
                details={"database_url": database_url.split("@")[-1]}
            ) from e
        logger.info("✅ Case-study database ready")

    @staticmethod
    def _to_domain(record: CaseStudyRecord) -> CaseStudy:
        return CaseStudy(
            id=record.id,
            title=record.title,
            description=record.description,
            question=record.question,
            options=list(record.options),
            correct_answer=record.correct_answer,
            explanation=record.explanation,
            disease_field=record.disease_field,
            owner_id=record.owner_id,
            created_at=record.created_at,
        )

    def add(self, owner_id: str, case_study: CaseStudy) -> CaseStudy:
        record = CaseStudyRecord(
            id=_new_id(),
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc),
            title=case_study.title,
            description=case_study.description,
            question=case_study.question,
            options=list(case_study.options),
            correct_answer=case_study.correct_answer,
            explanation=case_study.explanation,
            disease_field=case_study.disease_field,
        )
        try:
            with self._SessionLocal() as session:
                session.add(record)
                session.commit()
                session.refresh(record)
                return self._to_domain(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save case study for owner {owner_id}: {e}")
            raise PersistenceError("Failed to save case study", details={"owner_id": owner_id}) from e

    def list_for_owner(self, owner_id: str) -> List[CaseStudy]:
        try:
            with self._SessionLocal() as session:
                records = (
                    session.query(CaseStudyRecord)
                    .filter(CaseStudyRecord.owner_id == owner_id)
                    .order_by(CaseStudyRecord.pk)
                    .all()
                )
                return [self._to_domain(record) for record in records]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list case studies for owner {owner_id}: {e}")
            raise PersistenceError("Failed to load case studies", details={"owner_id": owner_id}) from e

    def get(self, owner_id: str, case_id: str) -> Optional[CaseStudy]:
        try:
            with self._SessionLocal() as session:
                record = (
                    session.query(CaseStudyRecord)
                    .filter(CaseStudyRecord.owner_id == owner_id, CaseStudyRecord.id == case_id)
                    .one_or_none()
                )
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to load case study {case_id}: {e}")
            raise PersistenceError("Failed to load case study", details={"case_id": case_id}) from e

    def delete(self, owner_id: str, case_id: str) -> bool:
        try:
            with self._SessionLocal() as session:
                deleted = (
                    session.query(CaseStudyRecord)
                    .filter(CaseStudyRecord.owner_id == owner_id, CaseStudyRecord.id == case_id)
                    .delete(synchronize_session=False)
                )
                session.commit()
                return deleted > 0
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete case study {case_id}: {e}")
            raise PersistenceError("Failed to delete case study", details={"case_id": case_id}) from e

    def dispose(self) -> None:
        self._engine.dispose()


def create_repository(database_url: Optional[str]):
    """Build the configured store: SQL when a URL is given, in-memory otherwise."""
    if database_url:
        return SqlAlchemyCaseStudyRepository(database_url)
    logger.warning("No database URL configured - case studies are kept in memory only")
    return InMemoryCaseStudyRepository()
