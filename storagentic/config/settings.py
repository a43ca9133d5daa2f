"""
Assistant settings

Storage and completion credentials are optional: leaving either pair empty
selects the degraded (mock / rule-based) behaviour instead of failing.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase storage backend
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""

    # Completion service (any OpenAI-compatible endpoint, Groq by default)
    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    COMPLETION_TIMEOUT_SECONDS: float = 15.0
    COMPLETION_MAX_TOKENS: int = 250

    # Demo behaviour when running without Supabase
    MOCK_BOOKING_DELAY_SECONDS: float = 1.0

    # Chat
    DEFAULT_USER_ID: str = "guest"

    # Other
    LOG_LEVEL: str = "INFO"
    PORT: int = 5001

    @property
    def has_supabase_config(self) -> bool:
        """Both Supabase URL and anon key are present and non-empty"""
        return bool(self.SUPABASE_URL.strip() and self.SUPABASE_ANON_KEY.strip())

    @property
    def has_completion_config(self) -> bool:
        """A completion API key is configured"""
        return bool(self.GROQ_API_KEY.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
