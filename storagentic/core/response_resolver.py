"""
Response resolution

Turns a visitor's query into exactly one reply by asking an ordered list of
providers and returning the first answer. Cheap, deterministic providers go
first; the rule-based fallback always terminates the chain.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import ResolutionResult, ResolutionSource
from ..services.knowledge_service import KnowledgeBase
from .completion_client import CompletionClient
from .rule_based_responses import RuleBasedFallback

logger = logging.getLogger(__name__)


class ResponseProvider(ABC):
    """One resolution tier"""

    source: ResolutionSource

    @abstractmethod
    async def attempt(self, query: str) -> Optional[str]:
        """Return a reply, or None to defer to the next tier"""
        pass


class FaqProvider(ResponseProvider):
    source = ResolutionSource.FAQ

    def __init__(self, knowledge_base: KnowledgeBase):
        self.knowledge_base = knowledge_base

    async def attempt(self, query: str) -> Optional[str]:
        entry = self.knowledge_base.match(query)
        if entry is None:
            return None
        logger.info(f"📚 Using FAQ answer: {entry.question}")
        return entry.answer


class CompletionProvider(ResponseProvider):
    source = ResolutionSource.COMPLETION

    def __init__(self, client: CompletionClient):
        self.client = client

    async def attempt(self, query: str) -> Optional[str]:
        if not self.client.is_available():
            return None
        logger.info("🤖 Calling completion service")
        return await self.client.complete(query)


class RuleProvider(ResponseProvider):
    source = ResolutionSource.RULE

    def __init__(self, fallback: RuleBasedFallback):
        self.fallback = fallback

    async def attempt(self, query: str) -> Optional[str]:
        logger.info(f"📋 Using rule-based reply ({self.fallback.categorize(query)})")
        return self.fallback.reply(query)


class ResponseResolver:
    """Ask providers in order; the first non-empty reply wins"""

    def __init__(self, providers: Sequence[ResponseProvider], fallback: RuleBasedFallback):
        self.fallback = fallback
        self.providers: List[ResponseProvider] = list(providers) + [RuleProvider(fallback)]

    async def resolve(self, query: str) -> ResolutionResult:
        for provider in self.providers:
            try:
                text = await provider.attempt(query)
            except Exception as e:
                logger.warning(f"⚠️ {provider.source.value} tier failed, falling through: {e}")
                continue

            if text:
                return ResolutionResult(text=text, source=provider.source)

        # Unreachable while the rule tier returns text
        return ResolutionResult(text=self.fallback.reply(query), source=ResolutionSource.RULE)


def build_response_resolver(knowledge_base: KnowledgeBase,
                            completion_client: CompletionClient,
                            fallback: Optional[RuleBasedFallback] = None) -> ResponseResolver:
    """FAQ -> completion -> rules"""
    return ResponseResolver(
        providers=[FaqProvider(knowledge_base), CompletionProvider(completion_client)],
        fallback=fallback or RuleBasedFallback(),
    )
