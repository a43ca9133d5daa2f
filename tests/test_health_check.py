from unittest.mock import AsyncMock, Mock

import pytest

from conftest import FakeQuery, FakeSupabase
from storagentic.exceptions import TransportFailure
from storagentic.models import CUSTOMER_INQUIRIES, InsertResult
from storagentic.services.health_check import (
    CONNECTION_ADVISORY,
    TABLE_ADVISORY,
    ConnectionHealthChecker,
)
from storagentic.services.storage_gateway import SupabaseStorageGateway


class TestConnectionHealthChecker:
    """Unit tests for startup connection checks"""

    @pytest.mark.asyncio
    async def test_probe_reachable(self):
        client = FakeSupabase({CUSTOMER_INQUIRIES: FakeQuery(data=[{"id": 1}])})
        checker = ConnectionHealthChecker(SupabaseStorageGateway(client))

        status = await checker.probe()

        assert status.reachable == True
        assert status.diagnostic is None
        assert checker.advisories == []
        assert ("limit", 1) in client.tables[CUSTOMER_INQUIRIES].calls

    @pytest.mark.asyncio
    async def test_probe_unreachable(self):
        client = FakeSupabase({CUSTOMER_INQUIRIES: FakeQuery(error=ConnectionError("connection refused"))})
        checker = ConnectionHealthChecker(SupabaseStorageGateway(client))

        status = await checker.probe()

        assert status.reachable == False
        assert "connection refused" in status.diagnostic
        assert checker.advisories == [CONNECTION_ADVISORY]
        assert checker.last_status == status

    @pytest.mark.asyncio
    async def test_probe_mock_mode(self, mock_storage):
        """Test mock mode is reported as unreachable without raising"""
        status = await ConnectionHealthChecker(mock_storage).probe()

        assert status.reachable == False
        assert "not configured" in status.diagnostic

    @pytest.mark.asyncio
    async def test_advisory_issued_once(self, mock_storage):
        checker = ConnectionHealthChecker(mock_storage)
        await checker.probe()
        await checker.probe()

        assert checker.advisories == [CONNECTION_ADVISORY]

    @pytest.mark.asyncio
    async def test_probe_unexpected_error(self):
        storage = Mock()
        storage.probe = AsyncMock(side_effect=KeyError("data"))

        status = await ConnectionHealthChecker(storage).probe()

        assert status.reachable == False


class TestVerifyInquiriesTable:
    """Tests for the customer_inquiries structure check"""

    @pytest.mark.asyncio
    async def test_valid_table(self):
        query = FakeQuery(data=[{"id": 9}])
        checker = ConnectionHealthChecker(SupabaseStorageGateway(FakeSupabase({CUSTOMER_INQUIRIES: query})))

        verification = await checker.verify_inquiries_table()

        assert verification.exists == True
        assert verification.error is None
        assert ("limit", 0) in query.calls
        assert ("eq", "message", "Table structure test") in query.calls
        assert checker.advisories == []

    @pytest.mark.asyncio
    async def test_insert_mismatch(self):
        storage = Mock()
        storage.is_live = True
        storage.probe = AsyncMock(return_value=[])
        storage.insert = AsyncMock(return_value=InsertResult(success=False))
        storage.delete_where = AsyncMock()
        checker = ConnectionHealthChecker(storage)

        verification = await checker.verify_inquiries_table()

        assert verification.exists == True
        assert "structure mismatch" in verification.message
        assert checker.advisories == [TABLE_ADVISORY]
        storage.delete_where.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_table(self):
        storage = Mock()
        storage.is_live = True
        storage.probe = AsyncMock(side_effect=TransportFailure('relation "customer_inquiries" does not exist'))
        storage.insert = AsyncMock()
        checker = ConnectionHealthChecker(storage)

        verification = await checker.verify_inquiries_table()

        assert verification.exists == False
        assert "does not exist" in verification.error
        storage.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_skipped_in_mock_mode(self, mock_storage):
        verification = await ConnectionHealthChecker(mock_storage).verify_inquiries_table()

        assert verification.exists == False
        assert "not configured" in verification.message
