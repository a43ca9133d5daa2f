"""
Storage gateway for the assistant's Supabase tables

Two interchangeable backends behind one interface:
- SupabaseStorageGateway talks to a live Supabase project
- MockStorageGateway serves built-in seed data and acknowledges writes
  without storing them

Every fetch/insert is total: failures are logged and degrade to seed data
or an unsuccessful InsertResult, never an exception.
"""

import asyncio
import logging
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from supabase import AsyncClient, acreate_client

from ..config import Settings
from ..exceptions import ConfigurationAbsent, TransportFailure
from ..models import (
    COLLECTION_SLOTS,
    COLLECTIONS,
    CUSTOMER_INQUIRIES,
    SERVICE_REQUESTS,
    InsertResult,
)
from .seed_data import get_seed

logger = logging.getLogger(__name__)

# collection -> (column, descending)
ORDERING: Dict[str, Tuple[str, bool]] = {
    SERVICE_REQUESTS: ("date", False),
    COLLECTION_SLOTS: ("date", False),
    CUSTOMER_INQUIRIES: ("created_at", True),
}


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")


class StorageGateway(ABC):
    """Abstract base class for assistant storage backends"""

    is_live: bool = False

    @abstractmethod
    async def fetch(self, collection: str) -> List[Dict[str, Any]]:
        """Fetch all records of a collection in its canonical order"""
        pass

    @abstractmethod
    async def insert(self, collection: str, record: Dict[str, Any]) -> InsertResult:
        """Insert a single record"""
        pass

    @abstractmethod
    async def probe(self, collection: str, limit: int = 1) -> List[Dict[str, Any]]:
        """Bounded read used by health checks; raises instead of degrading"""
        pass

    @abstractmethod
    async def delete_where(self, collection: str, column: str, value: Any) -> bool:
        """Delete maintenance records matching column == value"""
        pass


class SupabaseStorageGateway(StorageGateway):
    """Live Supabase backend"""

    is_live = True

    def __init__(self, client: AsyncClient):
        self.supabase = client

    async def fetch(self, collection: str) -> List[Dict[str, Any]]:
        _check_collection(collection)
        try:
            query = self.supabase.table(collection).select("*")
            if collection in ORDERING:
                column, descending = ORDERING[collection]
                query = query.order(column, desc=descending)
            result = await query.execute()

            if result.data is None:
                logger.warning(f"⚠️ No data returned for {collection}, using built-in data")
                return get_seed(collection)
            return result.data

        except Exception as e:
            logger.error(f"❌ Failed to fetch {collection}: {e}")
            return get_seed(collection)

    async def insert(self, collection: str, record: Dict[str, Any]) -> InsertResult:
        _check_collection(collection)
        try:
            result = await self.supabase.table(collection).insert(record).execute()
            rows = result.data or []
            record_id = rows[0].get("id") if rows else None

            logger.info(f"✅ Inserted into {collection}: {record_id}")
            return InsertResult(success=True, id=str(record_id) if record_id is not None else None)

        except Exception as e:
            logger.error(f"❌ Failed to insert into {collection}: {e}")
            return InsertResult(success=False)

    async def probe(self, collection: str, limit: int = 1) -> List[Dict[str, Any]]:
        _check_collection(collection)
        try:
            result = await self.supabase.table(collection).select("*").limit(limit).execute()
        except Exception as e:
            raise TransportFailure(str(e), source=collection) from e
        return result.data or []

    async def delete_where(self, collection: str, column: str, value: Any) -> bool:
        _check_collection(collection)
        try:
            await self.supabase.table(collection).delete().eq(column, value).execute()
            return True
        except Exception as e:
            logger.error(f"❌ Failed to delete from {collection} where {column}={value!r}: {e}")
            return False


class MockStorageGateway(StorageGateway):
    """In-memory stand-in used when Supabase is not configured.

    Writes are acknowledged with synthesized ids but not kept; nothing
    survives a restart.
    """

    is_live = False

    def __init__(self, booking_delay_seconds: float = 1.0):
        self.booking_delay_seconds = booking_delay_seconds

    async def fetch(self, collection: str) -> List[Dict[str, Any]]:
        _check_collection(collection)
        records = get_seed(collection)
        if collection in ORDERING:
            column, descending = ORDERING[collection]
            records.sort(key=lambda r: r.get(column) or "", reverse=descending)
        return records

    async def insert(self, collection: str, record: Dict[str, Any]) -> InsertResult:
        _check_collection(collection)
        prefix = "mock"
        if collection == SERVICE_REQUESTS:
            # Simulated booking latency
            await asyncio.sleep(self.booking_delay_seconds)
            prefix = "booking"

        record_id = f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
        logger.info(f"📝 Simulated insert into {collection}: {record_id}")
        return InsertResult(success=True, id=record_id)

    async def probe(self, collection: str, limit: int = 1) -> List[Dict[str, Any]]:
        _check_collection(collection)
        raise ConfigurationAbsent("Supabase connection not configured", source=collection)

    async def delete_where(self, collection: str, column: str, value: Any) -> bool:
        _check_collection(collection)
        return True


async def create_storage_gateway(settings: Settings) -> StorageGateway:
    """Pick the storage backend once, from validated settings"""
    mock = MockStorageGateway(booking_delay_seconds=settings.MOCK_BOOKING_DELAY_SECONDS)

    if not settings.has_supabase_config:
        logger.warning("⚠️ Supabase connection not configured, using built-in data")
        return mock

    try:
        client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
    except Exception as e:
        logger.warning(f"⚠️ Could not create Supabase client, using built-in data: {e}")
        return mock

    logger.info(f"🚀 Using Supabase storage: {settings.SUPABASE_URL}")
    return SupabaseStorageGateway(client)
