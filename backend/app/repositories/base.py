"""
Generic async repository over a single mapped model.

Every query built here goes through `_select()`, which appends the
soft-delete predicate (`is_deleted = false`) for models that have the
column. Pass `include_deleted=True` to bypass it explicitly.

Write helpers flush but never commit: the caller owns the transaction.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EntityNotFoundException
from app.db.base_class import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger("payroll.repositories")


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]
    entity_name: str = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def soft_deletable(self) -> bool:
        return hasattr(self.model, "is_deleted")

    def _not_deleted(self):
        return self.model.is_deleted.is_(False)

    def _select(self, *entities: Any, include_deleted: bool = False) -> Select:
        stmt = select(*entities) if entities else select(self.model)
        if self.soft_deletable and not include_deleted:
            stmt = stmt.where(self._not_deleted())
        return stmt

    @staticmethod
    def _paginate(stmt: Select, page: int, page_size: int) -> Select:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        return stmt.offset((page - 1) * page_size).limit(page_size)

    async def _all(self, stmt: Select) -> List[ModelT]:
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _first(self, stmt: Select) -> Optional[ModelT]:
        result = await self.db.execute(stmt.limit(1))
        return result.scalars().first()

    async def get_by_id(self, entity_id: int, include_deleted: bool = False) -> Optional[ModelT]:
        stmt = self._select(include_deleted=include_deleted).where(self.model.id == entity_id)
        return await self._first(stmt)

    async def get_by_id_or_raise(self, entity_id: int) -> ModelT:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundException(self.entity_name or self.model.__name__, entity_id)
        return entity

    async def get_all(self, include_deleted: bool = False) -> List[ModelT]:
        return await self._all(self._select(include_deleted=include_deleted).order_by(self.model.id))

    async def exists(self, *criteria: Any, include_deleted: bool = False) -> bool:
        stmt = self._select(self.model.id, include_deleted=include_deleted)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(select(stmt.exists()))
        return bool(result.scalar())

    async def count(self, *criteria: Any, include_deleted: bool = False) -> int:
        stmt = self._select(func.count(self.model.id), include_deleted=include_deleted)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        await self.db.flush()
        return entity

    async def soft_delete(self, entity: ModelT) -> ModelT:
        if not self.soft_deletable:
            raise TypeError(f"{self.model.__name__} does not support soft delete")
        entity.is_deleted = True
        entity.deleted_at = datetime.now(timezone.utc)
        await self.db.flush()
        logger.info(f"Soft-deleted {self.model.__name__} id={entity.id}")
        return entity

    async def restore(self, entity: ModelT) -> ModelT:
        if not self.soft_deletable:
            raise TypeError(f"{self.model.__name__} does not support soft delete")
        entity.is_deleted = False
        entity.deleted_at = None
        await self.db.flush()
        logger.info(f"Restored {self.model.__name__} id={entity.id}")
        return entity
