from typing import Any

import httpx

from ..base import InferenceClient
from ..models import FailureKind, InferenceResult

DEFAULT_API_URL = "https://api-inference.huggingface.co/models/facebook/blenderbot-400M-distill"


class HuggingFaceInferenceClient(InferenceClient):
    """Hugging Face hosted inference client.

    Hidden design decisions:
    - Endpoint URL and static bearer credential
    - Request body shape ({"inputs": prompt})
    - Response decoding (first element's "generated_text")
    - Mapping of transport and decoding problems onto FailureKind

    There is no retry and no backoff: each call issues exactly one POST.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        **client_kwargs: Any
    ):
        """Initialize the client.

        Args:
            api_key: Hugging Face access token (sent as a bearer credential)
            api_url: Full model endpoint URL
            timeout: Transport timeout in seconds
            **client_kwargs: Additional kwargs for httpx.AsyncClient
                (e.g. ``transport`` for tests)
        """
        self._api_url = api_url
        self._client = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            timeout=timeout,
            **client_kwargs
        )
        self._debug_callback: Any | None = None

    @property
    def api_url(self) -> str:
        """Get the endpoint URL."""
        return self._api_url

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    async def generate_reply(self, prompt: str) -> InferenceResult:
        """Send the prompt and extract the first generated text.

        Args:
            prompt: User text

        Returns:
            InferenceResult with the reply, or a TRANSPORT, EMPTY_RESPONSE
            or MALFORMED_RESPONSE failure
        """
        self._debug("info", f"POST {self._api_url} ({len(prompt)} chars)")
        try:
            response = await self._client.post(self._api_url, json={"inputs": prompt})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._debug("error", f"Transport error: {e}")
            return InferenceResult.failed(FailureKind.TRANSPORT, str(e))

        if not response.content:
            self._debug("warning", f"Empty body (HTTP {response.status_code})")
            return InferenceResult.failed(
                FailureKind.EMPTY_RESPONSE, f"HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            self._debug("warning", f"Body is not JSON: {e}")
            return InferenceResult.failed(FailureKind.MALFORMED_RESPONSE, "Body is not JSON")

        text = _extract_generated_text(payload)
        if text is None:
            self._debug("warning", f"Unexpected body shape (HTTP {response.status_code})")
            return InferenceResult.failed(
                FailureKind.MALFORMED_RESPONSE,
                f"Unexpected body shape (HTTP {response.status_code})"
            )

        self._debug("info", f"Reply received ({len(text)} chars)")
        return InferenceResult.success(text)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()


def _extract_generated_text(payload: Any) -> str | None:
    """Return payload[0]["generated_text"] if the payload has that shape."""
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    text = first.get("generated_text")
    return text if isinstance(text, str) else None
