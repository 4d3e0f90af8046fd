"""Provider-agnostic contract for structured generation calls."""

from dataclasses import dataclass
from typing import Any, Protocol

from ..models.request import Attachment


class ProviderError(Exception):
    """Raised by a provider when the call fails. Carries an HTTP-like status."""

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(f"[{status}] {message}" if status else message)


@dataclass
class PromptContents:
    """Prompt text plus at most one attached file."""
    text: str
    attachment: Attachment | None = None


@dataclass
class StructuredRequest:
    model: str
    contents: PromptContents
    response_format: str = "json"          # "json" or "text"
    schema: dict[str, Any] | None = None   # provider-native schema constraint


@dataclass
class ProviderResponse:
    text: str | None


class Provider(Protocol):
    """Swapping providers means implementing this one method."""

    def generate_structured(self, credential: str, request: StructuredRequest) -> ProviderResponse:
        ...

    def schema_for(self, contract) -> dict[str, Any]:
        """Render a SchemaContract in the provider's native constraint format."""
        ...
