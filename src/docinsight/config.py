"""Runtime configuration for the DocInsight services."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from docinsight.services.gateway import GatewayConfig


class Settings(BaseSettings):
    """Environment-backed configuration model."""

    model_config = SettingsConfigDict(env_prefix="docinsight_", env_file=".env", case_sensitive=False)

    environment: Literal["dev", "test", "prod"] = "dev"

    # Generative backend
    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1"
    gemini_model: str = "gemini-1.5-flash"

    generation_temperature: float = 0.2
    generation_top_k: int = 40
    generation_top_p: float = 0.9
    generation_max_output_tokens: int = 4096

    # None disables the client timeout entirely
    request_timeout_seconds: float | None = 60.0

    # Fallback output
    fallback_seed: int | None = None
    max_fallback_results: int = 4

    summary_concurrency: int = 4
    credential_min_length: int = 10

    # CORS for browser-based collaborators
    cors_allow_origins: tuple[str, ...] = ()

    def generation_config(self) -> GatewayConfig:
        return GatewayConfig(
            base_url=self.gemini_base_url,
            model=self.gemini_model,
            temperature=self.generation_temperature,
            top_k=self.generation_top_k,
            top_p=self.generation_top_p,
            max_output_tokens=self.generation_max_output_tokens,
            timeout_seconds=self.request_timeout_seconds,
            credential_min_length=self.credential_min_length,
        )


@lru_cache(maxsize=1)
def _cached_settings() -> Settings:
    return Settings()


def get_settings(override: Optional[dict[str, object]] = None) -> Settings:
    """Return settings, optionally overriding values without mutating cache."""

    if override:
        return Settings(**override)
    return _cached_settings()
