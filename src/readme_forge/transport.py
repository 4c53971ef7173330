"""Transport for the hosted chat completion API."""

from __future__ import annotations

from typing import Protocol

import httpx
from pydantic import ValidationError
import structlog

from readme_forge.config import DEFAULT_API_BASE_URL
from readme_forge.errors import TransportError
from readme_forge.models import ChatCompletionRequest, ChatCompletionResponse

logger = structlog.get_logger(__name__)


class GenerationTransport(Protocol):
    """Turns a completion request into generated text.

    Implementations return the first choice's content (``None`` when the
    response carries none) and raise :class:`TransportError` on any failure.
    """

    async def complete(self, request: ChatCompletionRequest, *, api_key: str) -> str | None: ...


class ChatCompletionClient:
    """Client for an OpenAI-compatible ``/chat/completions`` endpoint (Groq by default).

    One request per call, no retries. Every non-2xx status is reported the
    same way.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 60.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def complete(self, request: ChatCompletionRequest, *, api_key: str) -> str | None:
        """Send ``request`` and return the generated text.

        Args:
            request: Completion request body.
            api_key: Bearer token for the endpoint.

        Returns:
            Content of the first choice, or None if the response has no content.

        Raises:
            TransportError: On network errors, non-2xx responses, or an
                undecodable body.
        """
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=request.model_dump(mode="json"),
                    headers=headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "chat_completion_http_error",
                status_code=e.response.status_code,
                model=request.model,
            )
            raise TransportError(
                f"HTTP error! status: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("chat_completion_request_failed", error=str(e), model=request.model)
            raise TransportError(f"Request failed: {e}") from e

        try:
            parsed = ChatCompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("chat_completion_response_parse_failed", error=str(e))
            raise TransportError("Invalid chat completion response format") from e

        return parsed.first_content()
