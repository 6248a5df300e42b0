from abc import ABC, abstractmethod
from typing import Any

from .models import InferenceResult


class InferenceClient(ABC):
    """Abstract base class for text-generation clients.

    This module hides the design decision of which hosted model answers the
    user. Implementations must handle provider-specific details like:
    - Endpoint and credential setup
    - Request body encoding
    - Response decoding and failure classification

    Implementations never raise for transport or decoding problems; they
    report them through the returned InferenceResult instead.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            result = await client.generate_reply("hello")
    """

    @abstractmethod
    async def generate_reply(self, prompt: str) -> InferenceResult:
        """Submit a prompt and return the generated reply.

        Args:
            prompt: User text to send to the model

        Returns:
            InferenceResult carrying either the reply text or a failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "InferenceClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
