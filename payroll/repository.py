"""Generic persistence over one mapped entity type."""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import Base
from .models import Employee, Order

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Create, find and delete records of ``model`` through a session.

    Every write commits immediately; a failed commit is rolled back and the
    error is re-raised to the caller.
    """

    model: Type[ModelT]

    def __init__(self, session: Session, model: Optional[Type[ModelT]] = None):
        self.session = session
        if model is not None:
            self.model = model

    def save(self, entity: ModelT) -> ModelT:
        try:
            entity = self.session.merge(entity) if entity.id is not None else entity
            self.session.add(entity)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception(f"Error saving {self.model.__name__}")
            raise
        self.session.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.scalars(stmt))

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model))

    def delete(self, entity: ModelT) -> None:
        try:
            self.session.delete(entity)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception(f"Error deleting {self.model.__name__}")
            raise


class OrderRepository(Repository[Order]):
    model = Order


class EmployeeRepository(Repository[Employee]):
    model = Employee
