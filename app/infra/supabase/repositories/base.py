"""Shared Supabase table access for the obligation repositories"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from supabase import Client

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Typed access to one tenant-data table (templates, clients, tasks, tenant users).

    Rows are keyed by UUID strings and converted to pydantic models on read.
    Tenant scoping is the caller's job: pass tenant_id in the filters.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _to_model(self, data: Dict[str, Any]) -> T:
        return self._model_class(**data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        return [self._to_model(item) for item in data]

    async def find_by_id(self, id: str) -> Optional[T]:
        """Row with this UUID, regardless of tenant; None when missing"""
        response = self._client.table(self._table_name).select("*").eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """Rows matching every column = value pair in `filters`"""
        query = self._client.table(self._table_name).select("*")

        for key, value in filters.items():
            query = query.eq(key, value)

        if order_by:
            query = query.order(order_by)

        if limit:
            query = query.limit(limit)

        response = query.execute()
        return self._to_models(response.data)

    async def create(self, data: CreateT) -> T:
        """
        Insert a row and return it as stored (with id and timestamps).

        Raises:
            ValueError: PostgREST returned no row for the insert
        """
        row = data.model_dump(mode='json')
        response = self._client.table(self._table_name).insert(row).execute()

        if not response.data:
            raise ValueError(f"Insert into {self._table_name} returned no row")

        return self._to_model(response.data[0])

    async def update(self, id: str, data: UpdateT) -> Optional[T]:
        """Apply only the fields set on `data`; None when the row is gone"""
        changes = data.model_dump(exclude_unset=True, mode='json')

        if not changes:
            return await self.find_by_id(id)

        response = self._client.table(self._table_name).update(changes).eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete(self, id: str) -> bool:
        """Delete by UUID; False when nothing matched"""
        response = self._client.table(self._table_name).delete().eq("id", id).execute()
        return len(response.data) > 0
