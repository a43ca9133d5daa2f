"""
Booking service for collection pickups and other service requests
"""

import logging

from ..models import SERVICE_REQUESTS, CollectionBooking, InsertResult, ServiceRequest, ServiceStatus
from .storage_gateway import StorageGateway

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, storage: StorageGateway):
        self.storage = storage

    async def create_service_request(self, request: ServiceRequest) -> InsertResult:
        record = request.model_dump(mode="json", exclude_none=True)
        result = await self.storage.insert(SERVICE_REQUESTS, record)
        if not result.success:
            logger.error(f"❌ Failed to book {request.service_type} for {request.name}")
        return result

    async def book_collection(self, booking: CollectionBooking) -> InsertResult:
        """Turn a collection form into a pending service request"""
        logger.info(f"📅 Booking collection for {booking.name} on {booking.date} at {booking.time}")
        request = ServiceRequest(
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            service_type="collection",
            date=booking.date,
            time=booking.time,
            address=booking.address,
            notes=booking.items,
            status=ServiceStatus.PENDING,
        )
        return await self.create_service_request(request)
