"""Failure categories for blueprint generation."""

from .clients.base import ProviderError


class BlueprintError(Exception):
    """Base class for every classified generation failure."""

    category = "generation_failed"
    user_message = "Something went wrong while generating the blueprint. Please try again."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class EmptyInputError(BlueprintError):
    """No brand name, free text, or attached file was supplied."""

    category = "empty_input"
    user_message = "Enter a brand name or brand data, or attach a file."


class MissingCredentialError(BlueprintError):
    """Generation attempted without a validated credential."""

    category = "missing_credential"
    user_message = "An API key connection is required."


class ProviderAuthError(BlueprintError):
    """The credential lacks access to the requested model."""

    category = "provider_auth"
    user_message = (
        "The selected API key does not have access to this model. "
        "Select a key from a project with the required entitlement."
    )

    def __init__(self, message: str | None = None, status: int | None = None):
        self.status = status
        super().__init__(message)


class ProviderRateLimitError(BlueprintError):
    """Quota or rate limit exceeded."""

    category = "rate_limited"
    user_message = "Too many requests. Please wait a moment and try again."

    def __init__(self, message: str | None = None, status: int | None = None):
        self.status = status
        super().__init__(message)


class ProviderFailureError(BlueprintError):
    """Any other provider-side failure (server error, network, bad request)."""

    def __init__(self, message: str | None = None, status: int | None = None):
        self.status = status
        super().__init__(message)


class EmptyResponseError(BlueprintError):
    """Provider call succeeded but returned no text."""


class MalformedJsonError(BlueprintError):
    """Extracted response text is not valid JSON."""

    def __init__(self, message: str, snippet: str):
        self.snippet = snippet
        super().__init__(message)


class SchemaViolation(BlueprintError):
    """Parsed JSON does not satisfy the blueprint contract."""

    def __init__(self, message: str, errors: list[str]):
        self.errors = errors
        super().__init__(message)


AUTH_STATUSES = (401, 403, 404)
AUTH_MARKERS = (
    "requested entity was not found",
    "permission_denied",
    "permission denied",
    "api key not valid",
    "invalid api key",
    "incorrect api key",
    "unauthenticated",
)
RATE_LIMIT_MARKERS = ("resource_exhausted", "rate limit", "rate_limit", "too many requests")


def classify_provider_error(error: ProviderError) -> BlueprintError:
    """Map a raw provider error onto the failure taxonomy."""
    message = error.message or ""
    lowered = message.lower()

    if error.status == 429 or any(marker in lowered for marker in RATE_LIMIT_MARKERS):
        return ProviderRateLimitError(message, status=error.status)

    if error.status in AUTH_STATUSES or any(marker in lowered for marker in AUTH_MARKERS):
        return ProviderAuthError(message, status=error.status)

    return ProviderFailureError(message, status=error.status)
