"""Wire services from runtime settings."""

from __future__ import annotations

import httpx

from docinsight.config import Settings
from docinsight.services.fallback import FallbackSynthesizer
from docinsight.services.gateway import GeminiGateway
from docinsight.services.parsing import ResponseParser
from docinsight.services.prompts import PromptBuilder
from docinsight.services.query import QueryService


def build_gateway(settings: Settings, client: httpx.Client | None = None) -> GeminiGateway:
    return GeminiGateway(settings.gemini_api_key, settings.generation_config(), client=client)


def build_query_service(settings: Settings, gateway: GeminiGateway | None = None) -> QueryService:
    fallback = FallbackSynthesizer(seed=settings.fallback_seed, max_results=settings.max_fallback_results)
    return QueryService(
        gateway or build_gateway(settings),
        prompt_builder=PromptBuilder(),
        parser=ResponseParser(fallback, seed=settings.fallback_seed),
        fallback=fallback,
        summary_concurrency=settings.summary_concurrency,
    )
