from unittest.mock import AsyncMock, Mock

import pytest

from storagentic.core.response_resolver import (
    CompletionProvider,
    FaqProvider,
    ResponseProvider,
    ResponseResolver,
    build_response_resolver,
)
from storagentic.core.rule_based_responses import DEFAULT_RESPONSE, RuleBasedFallback
from storagentic.exceptions import MalformedResponse, TransportFailure
from storagentic.models import FaqEntry, ResolutionSource
from storagentic.services.knowledge_service import KnowledgeBase

HOURS = FaqEntry(id="4", question="What are your business hours?", answer="Mon-Fri 9-7, weekends 10-5")


def _completion_client(available=True, reply="From the model"):
    client = Mock()
    client.is_available = Mock(return_value=available)
    client.complete = AsyncMock(return_value=reply)
    return client


class TestResponseResolver:
    """Unit tests for the ordered FAQ -> completion -> rule chain"""

    @pytest.fixture
    def knowledge_base(self, mock_storage):
        return KnowledgeBase(mock_storage, entries=[HOURS])

    @pytest.mark.asyncio
    async def test_faq_scenario(self, knowledge_base):
        """Test the FAQ answer is used verbatim"""
        resolver = build_response_resolver(knowledge_base, _completion_client(available=False))

        result = await resolver.resolve("What are your hours?")

        assert result.text == "Mon-Fri 9-7, weekends 10-5"
        assert result.source == ResolutionSource.FAQ

    @pytest.mark.asyncio
    async def test_faq_wins_over_available_completion(self, knowledge_base):
        """Test the completion service is not called when an FAQ matches"""
        completion = _completion_client(available=True)
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve("what are your business hours? thanks")

        assert result.source == ResolutionSource.FAQ
        completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_completion_used_when_no_faq(self, knowledge_base):
        completion = _completion_client(available=True, reply="We are near the station.")
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve("Where is the nearest facility?")

        assert result.text == "We are near the station."
        assert result.source == ResolutionSource.COMPLETION
        completion.complete.assert_awaited_once_with("Where is the nearest facility?")

    @pytest.mark.asyncio
    async def test_loose_word_overlap_is_not_an_faq_hit(self, mock_storage):
        """Test a query sharing only scattered words with a question reaches the rules"""
        sizes = FaqEntry(id="1", question="What size storage units do you offer?", answer="5x5 to 10x30")
        knowledge_base = KnowledgeBase(mock_storage, entries=[sizes])
        resolver = build_response_resolver(knowledge_base, _completion_client(available=False))

        result = await resolver.resolve("what do you offer")

        assert result.source == ResolutionSource.RULE
        assert result.text == DEFAULT_RESPONSE

    @pytest.mark.asyncio
    async def test_rule_when_completion_unavailable(self, knowledge_base):
        """Test gibberish with no API key gets the 'still learning' reply"""
        completion = _completion_client(available=False)
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve("asdlkj random gibberish")

        assert result.text == DEFAULT_RESPONSE
        assert result.source == ResolutionSource.RULE
        completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        TransportFailure("timeout"),
        MalformedResponse("no choices"),
        RuntimeError("unexpected"),
    ])
    async def test_rule_when_completion_fails(self, knowledge_base, error):
        """Test completion errors fall through instead of propagating"""
        completion = _completion_client(available=True)
        completion.complete.side_effect = error
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve("I want to book a collection")

        assert result.source == ResolutionSource.RULE
        assert "book a collection" in result.text

    @pytest.mark.asyncio
    async def test_empty_completion_falls_through(self, knowledge_base):
        completion = _completion_client(available=True, reply="")
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve("zzz")

        assert result.source == ResolutionSource.RULE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [
        "a", "?", "What are your hours?", "book", "asdlkj", "Where are you located",
        "SECURITY", "1234", "Ünïcödé query", "what size units and what time",
    ])
    async def test_resolution_is_total(self, knowledge_base, query):
        """Test every non-empty query resolves to non-empty text"""
        completion = _completion_client(available=True)
        completion.complete.side_effect = TransportFailure("down")
        resolver = build_response_resolver(knowledge_base, completion)

        result = await resolver.resolve(query)

        assert result.text
        assert result.source in set(ResolutionSource)

    @pytest.mark.asyncio
    async def test_custom_provider_chain(self):
        """Test providers are asked in order until one answers"""
        calls = []

        class Silent(ResponseProvider):
            source = ResolutionSource.FAQ

            async def attempt(self, query):
                calls.append("silent")
                return None

        class Broken(ResponseProvider):
            source = ResolutionSource.COMPLETION

            async def attempt(self, query):
                calls.append("broken")
                raise TransportFailure("boom")

        resolver = ResponseResolver(providers=[Silent(), Broken()], fallback=RuleBasedFallback())

        result = await resolver.resolve("hours?")

        assert calls == ["silent", "broken"]
        assert result.source == ResolutionSource.RULE

    @pytest.mark.asyncio
    async def test_providers_in_isolation(self, knowledge_base):
        assert await FaqProvider(knowledge_base).attempt("asdlkj") is None
        assert await CompletionProvider(_completion_client(available=False)).attempt("hi") is None
        assert await CompletionProvider(_completion_client(reply="ok")).attempt("hi") == "ok"
