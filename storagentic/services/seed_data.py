"""
Built-in data served when Supabase is not configured or unreachable.

Date-bearing seeds are kept in the same order the live queries return.
"""

import copy
from typing import Any, Dict, List

from ..models import (
    COLLECTION_SLOTS,
    CUSTOMER_INQUIRIES,
    FAQS,
    LOCATIONS,
    SERVICE_REQUESTS,
)

SEED_FAQS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "question": "What size storage units do you offer?",
        "answer": "We offer a variety of sizes, from small 5x5 lockers to large 10x30 units suitable for business inventory or household storage during a move.",
    },
    {
        "id": "2",
        "question": "Are your storage units climate controlled?",
        "answer": "Yes, we offer climate-controlled units that maintain a consistent temperature and humidity level to protect sensitive items.",
    },
    {
        "id": "3",
        "question": "How secure are your facilities?",
        "answer": "Our facilities feature 24/7 video surveillance, electronic gate access, on-site management, and individually alarmed units.",
    },
    {
        "id": "4",
        "question": "What are your business hours?",
        "answer": "Our office is open Monday to Friday from 9am to 7pm, and on weekends from 10am to 5pm. Gate access is available 24/7 for customers.",
    },
    {
        "id": "5",
        "question": "Do I need to sign a long-term contract?",
        "answer": "No, our rental agreements are month-to-month with no long-term commitment required.",
    },
]

SEED_LOCATIONS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Downtown Storage Center",
        "address": "123 Main St, Downtown",
        "phone": "(555) 123-4567",
        "hours": "Mon-Fri: 9am-7pm, Sat-Sun: 10am-5pm",
    },
    {
        "id": "2",
        "name": "Westside Storage Facility",
        "address": "456 West Ave, Westside",
        "phone": "(555) 987-6543",
        "hours": "Mon-Fri: 9am-7pm, Sat-Sun: 10am-5pm",
    },
    {
        "id": "3",
        "name": "Eastside Storage Units",
        "address": "789 East Blvd, Eastside",
        "phone": "(555) 456-7890",
        "hours": "Mon-Fri: 9am-7pm, Sat-Sun: 10am-5pm",
    },
]

SEED_COLLECTION_SLOTS: List[Dict[str, Any]] = [
    {"id": "1", "date": "2023-12-01", "timeSlots": ["9:00 AM", "11:00 AM", "2:00 PM", "4:00 PM"]},
    {"id": "2", "date": "2023-12-02", "timeSlots": ["10:00 AM", "1:00 PM", "3:00 PM"]},
    {"id": "3", "date": "2023-12-03", "timeSlots": ["9:00 AM", "12:00 PM", "5:00 PM"]},
]

_SEEDS: Dict[str, List[Dict[str, Any]]] = {
    FAQS: SEED_FAQS,
    CUSTOMER_INQUIRIES: [],
    SERVICE_REQUESTS: [],
    LOCATIONS: SEED_LOCATIONS,
    COLLECTION_SLOTS: SEED_COLLECTION_SLOTS,
}


def get_seed(collection: str) -> List[Dict[str, Any]]:
    """Return a fresh copy of the seed records for a collection"""
    return copy.deepcopy(_SEEDS.get(collection, []))
