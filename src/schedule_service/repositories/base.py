"""
Base repository with generic CRUD operations.

This module provides a generic BaseRepository class that implements
common database operations (Create, Read, Update, Delete) for any SQLAlchemy model.
All domain-specific repositories should extend this base class.
"""

from typing import Generic, TypeVar, Type, List, Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import desc, asc, inspect

from models.base import Base
from core.exceptions import DatabaseException


# Generic type bound to SQLAlchemy Base
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository with CRUD operations.

    This class provides standard database operations that can be inherited
    by all domain-specific repositories.

    Type Parameters:
        ModelType: The SQLAlchemy model type this repository manages

    Example:
        class ScheduleEventRepository(BaseRepository[ScheduleEvent]):
            def __init__(self, db: Session):
                super().__init__(ScheduleEvent, db)

            def find_by_day(self, day: str) -> List[ScheduleEvent]:
                return self.get_by_filter({"day": day})
    """

    # Kept from the stored row when a record is replaced by ID
    preserved_columns = ("id", "created_at", "updated_at")

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: SQLAlchemy database session
        """
        self.model = model
        self.db = db

    def _apply_ordering(self, query, order_by: Optional[str], order_desc: bool):
        if order_by and hasattr(self.model, order_by):
            order_column = getattr(self.model, order_by)
            query = query.order_by(desc(order_column) if order_desc else asc(order_column))
        return query

    def get(self, id: int) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        try:
            return self.db.query(self.model).filter(self.model.id == id).first()
        except Exception as e:
            raise DatabaseException(f"Failed to get {self.model.__name__} with id {id}") from e

    def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[str] = "id",
        order_desc: bool = False
    ) -> List[ModelType]:
        """
        Get all records, optionally paginated and sorted.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return (None for all)
            order_by: Field name to order by
            order_desc: Whether to order descending

        Returns:
            List of model instances
        """
        try:
            query = self._apply_ordering(self.db.query(self.model), order_by, order_desc)
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except Exception as e:
            raise DatabaseException(f"Failed to get all {self.model.__name__}") from e

    def get_by_filter(
        self,
        filters: Dict[str, Any],
        order_by: Optional[str] = "id",
        order_desc: bool = False
    ) -> List[ModelType]:
        """
        Get records whose columns equal the given values.

        Args:
            filters: Dictionary of field names and values to filter by
            order_by: Field name to order by
            order_desc: Whether to order descending

        Returns:
            List of model instances matching filters

        Raises:
            ValueError: If a filter names a column the model does not have
        """
        query = self.db.query(self.model)

        for key, value in filters.items():
            if not hasattr(self.model, key):
                raise ValueError(f"{self.model.__name__} has no field {key!r}")
            query = query.filter(getattr(self.model, key) == value)

        try:
            return self._apply_ordering(query, order_by, order_desc).all()
        except Exception as e:
            raise DatabaseException(f"Failed to filter {self.model.__name__}") from e

    def count(self) -> int:
        """Count all records."""
        try:
            return self.db.query(self.model).count()
        except Exception as e:
            raise DatabaseException(f"Failed to count {self.model.__name__}") from e

    def _reset_unset_columns(self, obj: ModelType) -> None:
        for attr in inspect(self.model).column_attrs:
            if attr.key in self.preserved_columns or attr.key in obj.__dict__:
                continue
            default = attr.columns[0].default
            value = default.arg if default is not None and default.is_scalar else None
            setattr(obj, attr.key, value)

    def save(self, obj: ModelType) -> ModelType:
        """
        Insert or fully replace a record.

        Objects without an ID are inserted and receive a new one. Objects
        carrying an ID replace the stored row with that ID. Columns left unset
        on such an object are reset to their column default (or None) rather
        than keeping the stored value.

        Args:
            obj: Model instance to persist

        Returns:
            The persistent instance with ID populated
        """
        try:
            if obj.id is None:
                self.db.add(obj)
            else:
                self._reset_unset_columns(obj)
                obj = self.db.merge(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to save {self.model.__name__}") from e

    def delete(self, obj: ModelType) -> bool:
        """
        Delete a record.

        Args:
            obj: Model instance to delete

        Returns:
            True if successful
        """
        try:
            self.db.delete(obj)
            self.db.commit()
            return True
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to delete {self.model.__name__}") from e

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.get(id)
        if obj is None:
            return False
        return self.delete(obj)

    def delete_all(self) -> int:
        """
        Delete every record of this model.

        Returns:
            Number of rows removed
        """
        try:
            removed = self.db.query(self.model).delete(synchronize_session=False)
            self.db.commit()
            return removed
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to delete all {self.model.__name__}") from e

    def exists(self, id: int) -> bool:
        """
        Check if a record exists.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        try:
            return self.db.query(self.model).filter(self.model.id == id).count() > 0
        except Exception as e:
            raise DatabaseException(f"Failed to check existence of {self.model.__name__}") from e
