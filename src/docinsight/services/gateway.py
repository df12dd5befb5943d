"""HTTP gateway to the Gemini generative language API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence

import httpx

from docinsight.metrics.observability import PipelineMetrics, TimedSection, get_logger

DEFAULT_SAFETY_SETTINGS: Sequence[Mapping[str, str]] = (
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
)

CREDENTIAL_CHECK_PROMPT = "Hello, this is a test message."


class GatewayError(RuntimeError):
    """Raised when the generative backend cannot produce text."""


class TransportError(GatewayError):
    """Raised when the HTTP request itself could not complete."""


class UpstreamError(GatewayError):
    """Raised when the backend answers with a non-success status."""

    def __init__(self, status_text: str, body: str, status_code: int | None = None) -> None:
        super().__init__(f"Gemini API error: {status_text} - {body}")
        self.status_text = status_text
        self.body = body
        self.status_code = status_code


class EmptyResponseError(GatewayError):
    """Raised when the backend succeeds but returns no candidate text."""


@dataclass(frozen=True)
class GatewayConfig:
    """Generation parameters sent with every request."""

    base_url: str = "https://generativelanguage.googleapis.com/v1"
    model: str = "gemini-1.5-flash"
    temperature: float = 0.2
    top_k: int = 40
    top_p: float = 0.9
    max_output_tokens: int = 4096
    safety_settings: Sequence[Mapping[str, str]] = field(default=DEFAULT_SAFETY_SETTINGS)
    timeout_seconds: float | None = 60.0
    credential_min_length: int = 10

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class GenerationBackend(Protocol):
    """Protocol describing text generation from a prompt."""

    def generate(self, prompt: str) -> str:
        """Return the backend's raw text reply for ``prompt``."""


class GeminiGateway:
    """Blocking client for ``models/{model}:generateContent``.

    One request per call, no retries and no caching. The API key is supplied by
    the caller at construction time; a missing key fails every call with
    ``UpstreamError`` before any network traffic.
    """

    def __init__(
        self,
        api_key: str | None,
        config: GatewayConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._config = config or GatewayConfig()
        self._client = client or httpx.Client(timeout=self._config.timeout_seconds)
        self._logger = get_logger("gateway")

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._config.temperature,
                "topK": self._config.top_k,
                "topP": self._config.top_p,
                "maxOutputTokens": self._config.max_output_tokens,
            },
            "safetySettings": [dict(item) for item in self._config.safety_settings],
        }

    def generate(self, prompt: str) -> str:
        try:
            text = self._generate(prompt)
        except GatewayError as exc:
            self._logger.warning(
                "gateway.error",
                model=self._config.model,
                error_kind=type(exc).__name__,
                detail=str(exc),
            )
            raise
        self._logger.info("gateway.response", model=self._config.model, response_chars=len(text))
        return text

    def _generate(self, prompt: str) -> str:
        if not self._api_key:
            PipelineMetrics.observe_model_failure("upstream")
            raise UpstreamError("Unauthorized", "No API key configured", status_code=None)

        self._logger.info("gateway.request", model=self._config.model, prompt_chars=len(prompt))
        with TimedSection(PipelineMetrics.observe_model_call):
            response = self._post(self._api_key, self.build_payload(prompt))

        if not response.is_success:
            PipelineMetrics.observe_model_failure("upstream")
            raise UpstreamError(response.reason_phrase, response.text, status_code=response.status_code)
        return self._extract_text(response)

    def validate_credential(self, api_key: str | None) -> bool:
        """Check a candidate key with a minimal generation request. Never raises."""

        if not api_key or len(api_key) < self._config.credential_min_length:
            return False
        payload = {
            "contents": [{"parts": [{"text": CREDENTIAL_CHECK_PROMPT}]}],
            "generationConfig": {"temperature": 0.1, "maxOutputTokens": 10},
        }
        try:
            response = self._post(api_key, payload)
        except TransportError as exc:
            self._logger.warning("gateway.credential_check_failed", detail=str(exc))
            return False
        if not response.is_success:
            self._logger.warning(
                "gateway.credential_rejected",
                status_code=response.status_code,
                status_text=response.reason_phrase,
            )
            return False
        return True

    def close(self) -> None:
        self._client.close()

    def _post(self, api_key: str, payload: Mapping[str, Any]) -> httpx.Response:
        try:
            return self._client.post(
                self._config.endpoint,
                params={"key": api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            PipelineMetrics.observe_model_failure("transport")
            raise TransportError(f"Request to {self._config.model} failed: {exc}") from exc

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError as exc:
            PipelineMetrics.observe_model_failure("empty")
            raise EmptyResponseError("No response from Gemini API") from exc
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            PipelineMetrics.observe_model_failure("empty")
            raise EmptyResponseError("No response from Gemini API")
        try:
            text = candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            PipelineMetrics.observe_model_failure("empty")
            raise EmptyResponseError("Gemini API returned a candidate without text") from exc
        if not isinstance(text, str):
            PipelineMetrics.observe_model_failure("empty")
            raise EmptyResponseError("Gemini API returned a candidate without text")
        return text
