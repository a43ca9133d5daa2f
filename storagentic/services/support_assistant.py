"""
Support assistant facade

Wires the storage gateway, knowledge base, completion client, resolver,
inquiry logger and health checker together and exposes the operations the
chat widget needs.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..config import Settings
from ..core.completion_client import CompletionClient
from ..core.response_resolver import ResponseResolver, build_response_resolver
from ..core.rule_based_responses import RuleBasedFallback
from ..models import (
    COLLECTION_SLOTS,
    CUSTOMER_INQUIRIES,
    FAQS,
    LOCATIONS,
    SERVICE_REQUESTS,
    CollectionBooking,
    FaqEntry,
    HealthStatus,
    InsertResult,
    ResolutionResult,
)
from .booking_service import BookingService
from .health_check import ConnectionHealthChecker
from .inquiry_logger import InquiryLogger
from .knowledge_service import KnowledgeBase
from .storage_gateway import StorageGateway, create_storage_gateway

logger = logging.getLogger(__name__)

GREETING = "👋 Hello! I'm Stor-a-gentic, your friendly storage assistant. How can I help you today?"


@dataclass(frozen=True)
class QuickReply:
    id: str
    label: str
    message: str


QUICK_REPLIES: Tuple[QuickReply, ...] = (
    QuickReply("book", "Book a collection", "I want to book a collection service"),
    QuickReply("hours", "Store hours", "What are your store hours?"),
    QuickReply("sizes", "Storage sizes", "What size storage units do you offer?"),
    QuickReply("security", "Security", "How secure are your facilities?"),
    QuickReply("human", "Talk to human", "I'd like to speak with a human representative"),
)


class SupportAssistant:
    def __init__(self, settings: Settings, storage: StorageGateway,
                 completion_client: Optional[CompletionClient] = None):
        self.settings = settings
        self.storage = storage
        self.completion_client = completion_client or CompletionClient(settings)
        self.knowledge_base = KnowledgeBase(storage)
        self.resolver: ResponseResolver = build_response_resolver(
            self.knowledge_base, self.completion_client, RuleBasedFallback()
        )
        self.inquiry_logger = InquiryLogger(storage, default_user_id=settings.DEFAULT_USER_ID)
        self.health_checker = ConnectionHealthChecker(storage)
        self.booking_service = BookingService(storage)

    @classmethod
    async def create(cls, settings: Settings) -> "SupportAssistant":
        storage = await create_storage_gateway(settings)
        return cls(settings, storage)

    async def startup(self) -> HealthStatus:
        """Probe storage and load FAQs. Never raises."""
        status = await self.health_checker.probe()
        if status.reachable:
            verification = await self.health_checker.verify_inquiries_table()
            logger.info(f"Table verification result: {verification.message}")

        await self.knowledge_base.load()

        if not self.completion_client.is_available():
            logger.info("Using rule-based replies (no completion API key)")
        return status

    async def shutdown(self) -> None:
        await self.inquiry_logger.drain()
        await self.completion_client.close()

    # ===== CONVERSATION =====

    async def resolve(self, query: str) -> ResolutionResult:
        return await self.resolver.resolve(query)

    def log(self, message: str, response: str, user_id: Optional[str] = None) -> asyncio.Task:
        return self.inquiry_logger.log(message, response, user_id)

    async def handle_message(self, content: str, user_id: Optional[str] = None) -> Optional[ResolutionResult]:
        """Resolve a visitor message and log the exchange in the background.

        Blank messages are ignored and return None.
        """
        if not content or not content.strip():
            return None

        result = await self.resolve(content)
        self.log(content, result.text, user_id)
        return result

    async def probe(self) -> HealthStatus:
        return await self.health_checker.probe()

    @property
    def advisories(self) -> List[str]:
        return list(self.health_checker.advisories)

    # ===== REFERENCE DATA =====

    async def fetch_faqs(self) -> List[Dict[str, Any]]:
        return await self.storage.fetch(FAQS)

    async def fetch_locations(self) -> List[Dict[str, Any]]:
        return await self.storage.fetch(LOCATIONS)

    async def fetch_collection_slots(self) -> List[Dict[str, Any]]:
        return await self.storage.fetch(COLLECTION_SLOTS)

    async def fetch_service_requests(self) -> List[Dict[str, Any]]:
        return await self.storage.fetch(SERVICE_REQUESTS)

    async def fetch_inquiries(self) -> List[Dict[str, Any]]:
        return await self.storage.fetch(CUSTOMER_INQUIRIES)

    # ===== WRITES =====

    async def create_faq(self, faq: FaqEntry) -> InsertResult:
        return await self.storage.insert(FAQS, faq.model_dump(exclude_none=True))

    async def book_collection(self, booking: CollectionBooking) -> InsertResult:
        return await self.booking_service.book_collection(booking)
