"""Service layer orchestrations for DocInsight."""

from .fallback import FallbackSynthesizer
from .gateway import (
    EmptyResponseError,
    GatewayConfig,
    GatewayError,
    GeminiGateway,
    GenerationBackend,
    TransportError,
    UpstreamError,
)
from .parsing import ParseError, ResponseParser, ValidationLimits, clamp_confidence, extract_json_object
from .prompts import PromptBuilder, PromptBuilderConfig
from .query import PreconditionError, QueryService

__all__ = [
    "EmptyResponseError",
    "FallbackSynthesizer",
    "GatewayConfig",
    "GatewayError",
    "GeminiGateway",
    "GenerationBackend",
    "ParseError",
    "PreconditionError",
    "PromptBuilder",
    "PromptBuilderConfig",
    "QueryService",
    "ResponseParser",
    "TransportError",
    "UpstreamError",
    "ValidationLimits",
    "clamp_confidence",
    "extract_json_object",
]
