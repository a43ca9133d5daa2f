"""
Rule-based responses for Stor-a-gentic
Canned replies picked by keyword, used when neither the FAQ nor the
completion service produced an answer. Pure and instant (no I/O).
"""

from typing import List, Optional, Tuple

BOOKING_RESPONSE = (
    "I'd be happy to help you book a collection! Currently, we have slots available "
    "next week. When would you prefer us to come by?"
)

HOURS_RESPONSE = (
    "Our stores are open Monday to Friday from 9am to 7pm, and on weekends from 10am to 5pm."
)

HANDOFF_RESPONSE = (
    "I'll connect you with one of our customer service representatives. Please wait a moment "
    "while I transfer your chat, or call us directly at (555) 123-4567."
)

SIZING_RESPONSE = (
    "We offer a variety of storage unit sizes:\n"
    "- Small (5x5): Perfect for small furniture, boxes\n"
    "- Medium (10x10): Good for a 1-bedroom apartment\n"
    "- Large (10x20): Fits contents of a 2-3 bedroom house\n"
    "- Extra Large (10x30): Ideal for business inventory or large household moves"
)

SECURITY_RESPONSE = (
    "Your items' security is our top priority! Our facilities feature 24/7 video surveillance, "
    "electronic gate access, on-site management, and individually alarmed units."
)

FAQ_POINTER_RESPONSE = (
    "Here are some frequently asked questions:\n"
    "- What size storage units do you offer?\n"
    "- Do you offer climate controlled units?\n"
    "- How secure are your facilities?\n"
    "- What are your payment options?"
)

DEFAULT_RESPONSE = (
    "Thanks for your message! I'm still learning. For specific inquiries, you might want to "
    "check our FAQ section or speak with a human representative."
)

# (category, keywords, reply)
Rule = Tuple[str, Tuple[str, ...], str]

# Checked in order; "book a secure unit" is a booking question
KEYWORD_RULES: List[Rule] = [
    ("booking", ("book", "collection"), BOOKING_RESPONSE),
    ("hours", ("hours", "time"), HOURS_RESPONSE),
    ("handoff", ("human", "representative", "speak"), HANDOFF_RESPONSE),
    ("sizing", ("size", "unit"), SIZING_RESPONSE),
    ("security", ("security", "secure"), SECURITY_RESPONSE),
    ("faq", ("faq", "question"), FAQ_POINTER_RESPONSE),
]


class RuleBasedFallback:
    """Keyword to canned-reply mapping. Never fails, never returns empty text."""

    def __init__(self, rules: Optional[List[Rule]] = None,
                 default_response: str = DEFAULT_RESPONSE):
        self.rules = rules if rules is not None else KEYWORD_RULES
        self.default_response = default_response

    def _match(self, query: str) -> Tuple[str, str]:
        query_lower = query.lower()
        for category, keywords, response in self.rules:
            if any(keyword in query_lower for keyword in keywords):
                return category, response
        return "default", self.default_response

    def categorize(self, query: str) -> str:
        """Name of the first matching rule category, or 'default'"""
        return self._match(query)[0]

    def reply(self, query: str) -> str:
        return self._match(query)[1]
