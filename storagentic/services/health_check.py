"""
Startup connection checks for the Supabase backend

Results are advisory only: an unreachable store never stops startup, the
gateway simply keeps serving built-in data.
"""

import logging
from typing import List, Optional

from ..exceptions import AssistantError, ConfigurationAbsent
from ..models import CUSTOMER_INQUIRIES, HealthStatus, TableVerification
from .storage_gateway import StorageGateway

logger = logging.getLogger(__name__)

CONNECTION_ADVISORY = "Database connection issues. Some features may be limited."
TABLE_ADVISORY = "Please check your Supabase table configuration."

TEST_INQUIRY = {
    "message": "Table structure test",
    "response": "Test response",
    "user_id": "test_user",
}


class ConnectionHealthChecker:
    def __init__(self, storage: StorageGateway):
        self.storage = storage
        self.advisories: List[str] = []
        self.last_status: Optional[HealthStatus] = None

    def _advise(self, advisory: str) -> None:
        if advisory not in self.advisories:
            self.advisories.append(advisory)
            logger.warning(f"⚠️ {advisory}")

    async def probe(self) -> HealthStatus:
        """Read at most one inquiry to see whether the store answers"""
        logger.info("Testing Supabase connection...")
        try:
            await self.storage.probe(CUSTOMER_INQUIRIES, limit=1)
            status = HealthStatus(reachable=True)
            logger.info("✅ Supabase connection successful")
        except ConfigurationAbsent as e:
            status = HealthStatus(reachable=False, diagnostic=f"{e.message}; using built-in data")
        except AssistantError as e:
            status = HealthStatus(reachable=False, diagnostic=e.message)
            logger.error(f"❌ Supabase connection failed: {e.message}")
        except Exception as e:
            status = HealthStatus(reachable=False, diagnostic=str(e))
            logger.error(f"❌ Supabase connection failed: {e}")

        if not status.reachable:
            self._advise(CONNECTION_ADVISORY)
        self.last_status = status
        return status

    async def verify_inquiries_table(self) -> TableVerification:
        """Check that customer_inquiries can be read and written, then clean up"""
        if not self.storage.is_live:
            return TableVerification(exists=False, message="Supabase not configured, table not verified")

        logger.info("Verifying customer_inquiries table...")
        try:
            await self.storage.probe(CUSTOMER_INQUIRIES, limit=0)
        except Exception as e:
            logger.error(f"❌ Table verification error: {e}")
            self._advise(TABLE_ADVISORY)
            return TableVerification(exists=False, message="Failed to verify table structure", error=str(e))

        result = await self.storage.insert(CUSTOMER_INQUIRIES, dict(TEST_INQUIRY))
        if not result.success:
            self._advise(TABLE_ADVISORY)
            return TableVerification(
                exists=True,
                message="Table exists but insert failed - possible structure mismatch",
                error="insert failed",
            )

        await self.storage.delete_where(CUSTOMER_INQUIRIES, "message", TEST_INQUIRY["message"])
        logger.info("✅ customer_inquiries table exists and structure is valid")
        return TableVerification(exists=True, message="Table exists and structure is valid")
