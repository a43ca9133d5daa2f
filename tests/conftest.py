from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from storagentic.config import Settings
from storagentic.services.storage_gateway import MockStorageGateway


class FakeQuery:
    """Chainable stand-in for a Supabase query builder"""

    def __init__(self, data: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.data = data if data is not None else []
        self.error = error
        self.calls: List[tuple] = []

    def select(self, *columns):
        self.calls.append(("select",) + columns)
        return self

    def order(self, column, desc=False):
        self.calls.append(("order", column, desc))
        return self

    def limit(self, count):
        self.calls.append(("limit", count))
        return self

    def insert(self, record):
        self.calls.append(("insert", record))
        return self

    def delete(self):
        self.calls.append(("delete",))
        return self

    def eq(self, column, value):
        self.calls.append(("eq", column, value))
        return self

    async def execute(self):
        if self.error is not None:
            raise self.error
        return Mock(data=self.data)


class FakeSupabase:
    def __init__(self, tables: Optional[Dict[str, FakeQuery]] = None):
        self.tables = dict(tables or {})

    def table(self, name: str) -> FakeQuery:
        return self.tables.setdefault(name, FakeQuery())


@pytest.fixture
def settings():
    """Settings with no external services configured"""
    return Settings(
        _env_file=None,
        SUPABASE_URL="",
        SUPABASE_ANON_KEY="",
        GROQ_API_KEY="",
        MOCK_BOOKING_DELAY_SECONDS=0.0,
    )


@pytest.fixture
def mock_storage():
    return MockStorageGateway(booking_delay_seconds=0.0)
