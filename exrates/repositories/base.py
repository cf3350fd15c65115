"""Base repository with common query and batch insert operations."""
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exrates.db.session import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""
    
    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository.
        
        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db
    
    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key):
                    query = query.where(getattr(self.model, key) == value)
        return query
    
    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Any = None
    ) -> List[ModelType]:
        """
        Get all records with optional filtering, ordering and pagination.
        
        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, None for no limit
            filters: Dictionary of field names and values to filter by
            order_by: Column expression to order by
        """
        query = self._apply_filters(select(self.model), filters)
        
        if order_by is not None:
            query = query.order_by(order_by)
        
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        
        result = await self.db.execute(query)
        return list(result.scalars().all())
    
    async def exists(self, filters: Optional[Dict[str, Any]] = None) -> bool:
        """Check whether at least one record matches the filters."""
        query = select(self._apply_filters(select(self.model), filters).exists())
        result = await self.db.execute(query)
        return bool(result.scalar())
    
    async def create_many(self, objs: Sequence[ModelType]) -> List[ModelType]:
        """Insert records in one batch; the flush assigns their identities."""
        self.db.add_all(objs)
        await self.db.flush()
        return list(objs)
