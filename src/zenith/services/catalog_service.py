"""Catalog repository — uniform CRUD over buses, hotels and trains.

Learn: Catalog entities have no business rules, so one generic class
serves all three. Each router instantiates it with its model class.
Lookups return None / False for missing rows; the router decides
whether that is a 404.
"""

from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.db.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class CatalogRepository(Generic[ModelT]):
    """save / get / list_all / replace / delete for a single mapped table."""

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    async def save(self, values: dict[str, Any]) -> ModelT:
        entity = self.model(**values)
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def get(self, entity_id: int) -> Optional[ModelT]:
        return await self.db.get(self.model, entity_id)

    async def list_all(self) -> list[ModelT]:
        return await self.list_by()

    async def list_by(self, **filters: Any) -> list[ModelT]:
        """List rows matching every non-None filter exactly."""
        q = select(self.model)
        for column, value in filters.items():
            if value is not None:
                q = q.where(getattr(self.model, column) == value)
        result = await self.db.execute(q.order_by(self.model.id))
        return list(result.scalars().all())

    async def replace(self, entity_id: int, values: dict[str, Any]) -> Optional[ModelT]:
        """Overwrite every writable column. Returns None if the row is missing."""
        entity = await self.get(entity_id)
        if not entity:
            return None
        for column, value in values.items():
            setattr(entity, column, value)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self.get(entity_id)
        if not entity:
            return False
        await self.db.delete(entity)
        await self.db.commit()
        return True
