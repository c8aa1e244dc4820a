"""
Completion service configuration settings.

Settings for the hosted language model that writes counselor replies.

Dependencies: pydantic, pydantic_settings
System role: Language model client configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompletionSettings(BaseSettings):
    """Gemini completion model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COMPLETION_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_API_KEY", "COMPLETION_API_KEY"),
        description="Google Generative AI API key (not validated at startup)",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model identifier used for replies",
    )
    temperature: float = Field(
        default=0.7,
        description="Sampling temperature for replies",
    )
