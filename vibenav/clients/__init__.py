"""API clients for model providers."""

from .base import PromptContents, Provider, ProviderError, ProviderResponse, StructuredRequest
from .gemini import GeminiClient
from .llm import LLMClient

__all__ = [
    "GeminiClient",
    "LLMClient",
    "PromptContents",
    "Provider",
    "ProviderError",
    "ProviderResponse",
    "StructuredRequest",
]
