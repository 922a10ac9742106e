"""Base repository: generic CRUD and clone over integer-keyed admin tables."""

import copy
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import STORE_ASSIGNED_FIELDS
from app.infrastructure.persistence.database import Base
from app.shared.utils.datetime import utc_now


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all, create, update_fields, delete and clone_row.

    Works on ORM instances; entity repositories map them to DTOs.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, *order_by: Any) -> list[ModelType]:
        """Return every record in the given order."""
        result = await self.db.execute(select(self.model).order_by(*order_by))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload store-assigned columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_fields(self, obj: ModelType, values: dict[str, Any]) -> ModelType:
        """Apply a partial update and refresh updated_at.

        Keys naming store-assigned or unknown columns are ignored.
        """
        writable = self.writable_columns()
        for key, value in values.items():
            if key in writable:
                setattr(obj, key, value)
        model: Any = obj
        model.updated_at = utc_now()
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()

    async def clone_row(self, obj: ModelType) -> ModelType:
        """Insert a copy of obj without its store-assigned columns."""
        values = {
            key: copy.deepcopy(getattr(obj, key)) for key in self.writable_columns()
        }
        return await self.create(self.model(**values))

    def writable_columns(self) -> set[str]:
        """Mapped column names a client may set."""
        mapper = sa_inspect(self.model)
        return {
            attr.key
            for attr in mapper.column_attrs
            if attr.key not in STORE_ASSIGNED_FIELDS
        }
