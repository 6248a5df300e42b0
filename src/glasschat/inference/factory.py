from typing import Any

from .base import InferenceClient
from .providers import HuggingFaceInferenceClient


def create_inference_client(provider: str, **config: Any) -> InferenceClient:
    """Create an inference client instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('huggingface' or its alias 'hf')
        **config: Provider-specific configuration
            For Hugging Face:
                - api_key: str (required)
                - api_url: str (default: blenderbot-400M-distill endpoint)
                - timeout: float (default: 30.0)

    Returns:
        Initialized inference client

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> client = create_inference_client("huggingface", api_key="hf_...")
    """
    provider_lower = provider.lower()

    if provider_lower in ("huggingface", "hf"):
        if "api_key" not in config:
            raise TypeError("Hugging Face provider requires 'api_key' in config")
        return HuggingFaceInferenceClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'huggingface'"
    )
