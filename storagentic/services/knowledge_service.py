"""
Knowledge service providing FAQ answers to the assistant
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError

from ..models import FAQS, FaqEntry
from .storage_gateway import StorageGateway

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")


def _words(text: str) -> List[str]:
    return _WORD_RE.findall(text)


def _is_subsequence(needle: List[str], haystack: List[str]) -> bool:
    remaining = iter(haystack)
    return all(word in remaining for word in needle)


class KnowledgeBase:
    """FAQ entries loaded from storage, matched by substring"""

    def __init__(self, storage: StorageGateway, entries: Iterable[FaqEntry] = ()):
        self.storage = storage
        self._entries: Tuple[FaqEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[FaqEntry, ...]:
        return self._entries

    async def load(self) -> Tuple[FaqEntry, ...]:
        """Replace the loaded FAQ set with the current contents of storage"""
        records = await self.storage.fetch(FAQS)

        entries = []
        for record in records:
            try:
                entries.append(FaqEntry.model_validate(record))
            except ValidationError as e:
                logger.warning(f"⚠️ Skipping malformed FAQ record {record.get('id')}: {e}")

        self._entries = tuple(entries)
        logger.info(f"✅ Loaded {len(self._entries)} FAQs")
        return self._entries

    def match(self, query: str) -> Optional[FaqEntry]:
        """Find the FAQ answering the query.

        Both strings are case-folded. First pass: the first entry (in load
        order) whose question is a substring of the query, or which contains
        the query as a substring. Second pass, only when nothing matched: the
        first entry whose question is the query with a single word added
        ("what are your hours" -> "What are your business hours?").
        """
        if not query.strip():
            return None

        folded_query = query.casefold()
        for entry in self._entries:
            folded_question = entry.question.casefold()
            if folded_question in folded_query or folded_query in folded_question:
                return entry

        query_words = _words(folded_query)
        if not query_words:
            return None
        for entry in self._entries:
            question_words = _words(entry.question.casefold())
            if len(question_words) - len(query_words) != 1:
                continue
            if _is_subsequence(query_words, question_words):
                return entry
        return None
