from .huggingface import DEFAULT_API_URL, HuggingFaceInferenceClient

__all__ = ["DEFAULT_API_URL", "HuggingFaceInferenceClient"]
