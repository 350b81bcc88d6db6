"""
Generic CRUD repository shared by every entity type.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Generic, Iterator, List, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import Session, sessionmaker

from sample_mcp.errors import NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    Uniform Create/FindByID/FindAll/Update/Delete over one model class.

    The session factory is the shared store handle; each operation runs in its
    own short-lived session. Store errors are re-raised unchanged after rollback.
    """

    def __init__(self, model: Type[ModelT], session_factory: sessionmaker):
        self.model = model
        self.session_factory = session_factory
        self._pk = inspect(model).primary_key[0]

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session scope for one repository call."""
        db = self.session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def identity(self, entity: ModelT) -> Any:
        return getattr(entity, self._pk.key)

    def create(self, entity: ModelT) -> ModelT:
        """Insert the entity; its generated id and timestamps are set on return."""
        with self.session() as db:
            db.add(entity)
            db.commit()
            db.refresh(entity)
            logger.debug(f"Created {self.entity_name} {self.identity(entity)}")
            return entity

    def find_by_id(self, entity_id: Any) -> ModelT:
        with self.session() as db:
            entity = db.get(self.model, entity_id)
            if entity is None:
                raise NotFoundError(self.entity_name, **{self._pk.key: entity_id})
            return entity

    def find_all(self) -> List[ModelT]:
        with self.session() as db:
            return db.query(self.model).all()

    def update(self, entity: ModelT) -> ModelT:
        """
        Replace all column values of the row matching the entity's id.

        Raises:
            NotFoundError: If no row has the entity's id
        """
        entity_id = self.identity(entity)
        with self.session() as db:
            if entity_id is None or db.get(self.model, entity_id) is None:
                raise NotFoundError(self.entity_name, **{self._pk.key: entity_id})

            if hasattr(entity, "updated_at"):
                entity.updated_at = datetime.utcnow()
            merged = db.merge(entity)
            db.commit()
            db.refresh(merged)
            logger.debug(f"Updated {self.entity_name} {entity_id}")
            return merged

    def delete(self, entity: ModelT) -> int:
        return self.delete_by_id(self.identity(entity))

    def delete_by_id(self, entity_id: Any) -> int:
        """Delete the row with this id; a missing row is not an error."""
        with self.session() as db:
            deleted = (
                db.query(self.model)
                .filter(self._pk == entity_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            logger.debug(f"Deleted {deleted} {self.entity_name} row(s) with id {entity_id}")
            return deleted
