"""
Completion client for free-text answers from an OpenAI-compatible
chat completion endpoint (Groq by default).

One request per query: no retries, no streaming, no caching.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI

from ..config import Settings
from ..exceptions import ConfigurationAbsent, MalformedResponse, TransportFailure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Stor-a-gentic, the friendly customer support assistant of a self-storage "
    "rental company. Help visitors with storage unit sizes, pricing, security, opening "
    "hours, and collection bookings.\n\n"
    "Guidelines:\n"
    "- Be warm, conversational, and brief (under 80 words)\n"
    "- If you don't know a specific detail, suggest contacting a representative at (555) 123-4567\n"
    "- Never invent prices or availability"
)


class CompletionClient:
    """Thin wrapper over AsyncOpenAI; absent when no API key is configured"""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.model = settings.GROQ_MODEL
        self.max_tokens = settings.COMPLETION_MAX_TOKENS
        self.client = client
        if self.client is None and settings.has_completion_config:
            self.client = AsyncOpenAI(
                api_key=settings.GROQ_API_KEY,
                base_url=settings.GROQ_BASE_URL,
                timeout=settings.COMPLETION_TIMEOUT_SECONDS,
                max_retries=0,
            )

    def is_available(self) -> bool:
        return self.client is not None

    async def complete(self, query: str) -> str:
        """Ask the completion service to answer a single query"""
        if self.client is None:
            raise ConfigurationAbsent("Completion API key not configured", source="completion")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": query},
                ],
                temperature=0.7,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise TransportFailure(f"Completion request failed: {e}", source="completion") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise MalformedResponse(f"Unexpected completion payload: {e}", source="completion") from e

        if not content or not content.strip():
            raise MalformedResponse("Completion returned no text", source="completion")
        return content.strip()

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
