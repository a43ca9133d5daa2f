"""
Customer inquiry logger
Persists each (message, reply) exchange to customer_inquiries without making
the conversation wait for the write.
"""

import asyncio
import logging
from typing import Optional, Set

from ..models import CUSTOMER_INQUIRIES, Inquiry
from .storage_gateway import StorageGateway

logger = logging.getLogger(__name__)


class InquiryLogger:
    def __init__(self, storage: StorageGateway, default_user_id: str = "guest"):
        self.storage = storage
        self.default_user_id = default_user_id
        # Strong references so pending writes are not garbage collected
        self._pending: Set[asyncio.Task] = set()

    def log(self, message: str, response: str, user_id: Optional[str] = None) -> asyncio.Task:
        """Schedule the inquiry write and return immediately.

        Must be called from a running event loop. The returned task never
        raises; production callers ignore it, tests may await it.
        """
        inquiry = Inquiry(
            message=message,
            response=response,
            user_id=user_id or self.default_user_id,
        )
        task = asyncio.create_task(self._persist(inquiry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _persist(self, inquiry: Inquiry) -> bool:
        try:
            record = inquiry.model_dump(exclude_none=True)
            result = await self.storage.insert(CUSTOMER_INQUIRIES, record)
        except Exception as e:
            logger.error(f"❌ Error saving inquiry from {inquiry.user_id}: {e}")
            return False

        if result.success:
            logger.info(f"✅ Saved inquiry {result.id}")
        else:
            logger.warning(f"⚠️ Inquiry from {inquiry.user_id} was not saved")
        return result.success

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for all scheduled inquiry writes to finish"""
        # Writes scheduled while waiting are picked up on the next round
        while self._pending:
            await asyncio.gather(*list(self._pending))
