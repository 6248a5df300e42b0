from .base import InferenceClient
from .factory import create_inference_client
from .models import FailureKind, InferenceFailure, InferenceResult
from .providers import DEFAULT_API_URL, HuggingFaceInferenceClient

__all__ = [
    "DEFAULT_API_URL",
    "FailureKind",
    "HuggingFaceInferenceClient",
    "InferenceClient",
    "InferenceFailure",
    "InferenceResult",
    "create_inference_client",
]
