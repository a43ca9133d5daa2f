from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Supabase tables
FAQS = "faqs"
CUSTOMER_INQUIRIES = "customer_inquiries"
SERVICE_REQUESTS = "service_requests"
LOCATIONS = "locations"
COLLECTION_SLOTS = "collection_slots"

COLLECTIONS = (FAQS, CUSTOMER_INQUIRIES, SERVICE_REQUESTS, LOCATIONS, COLLECTION_SLOTS)

# Live rows may use integer or uuid primary keys
RecordId = Union[str, int]


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class FaqEntry(Record):
    id: Optional[RecordId] = None
    question: str
    answer: str = Field(min_length=1)
    category: Optional[str] = None
    created_at: Optional[str] = None


class Inquiry(Record):
    id: Optional[RecordId] = None
    created_at: Optional[str] = None
    user_id: str
    message: str
    response: str


class ServiceStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ServiceRequest(Record):
    id: Optional[RecordId] = None
    name: str
    email: str
    phone: str
    service_type: str
    date: str
    time: str
    address: Optional[str] = None
    notes: Optional[str] = None
    status: ServiceStatus = ServiceStatus.PENDING
    created_at: Optional[str] = None


class CollectionBooking(Record):
    """Collection form as submitted by the booking widget"""
    name: str
    email: str
    phone: str
    date: str
    time: str
    address: str
    items: str


class ResolutionSource(str, Enum):
    FAQ = "faq"
    COMPLETION = "completion"
    RULE = "rule"


@dataclass(frozen=True)
class ResolutionResult:
    """A reply and the tier that produced it. Never persisted."""
    text: str
    source: ResolutionSource


@dataclass(frozen=True)
class InsertResult:
    success: bool
    id: Optional[str] = None


@dataclass(frozen=True)
class HealthStatus:
    reachable: bool
    diagnostic: Optional[str] = None


@dataclass(frozen=True)
class TableVerification:
    exists: bool
    message: str
    error: Optional[str] = None
