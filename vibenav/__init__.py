"""Vibe Navigation - brand website blueprint generation."""

from .app import (
    build_service,
    generate_blueprint,
    probe_connection,
    vault_clear,
    vault_load,
    vault_save,
)
from .errors import (
    BlueprintError,
    EmptyInputError,
    EmptyResponseError,
    MalformedJsonError,
    MissingCredentialError,
    ProviderAuthError,
    ProviderFailureError,
    ProviderRateLimitError,
    SchemaViolation,
)
from .models import Attachment, Blueprint, GenerationRequest, SectionConfig

__all__ = [
    "Attachment",
    "Blueprint",
    "BlueprintError",
    "EmptyInputError",
    "EmptyResponseError",
    "GenerationRequest",
    "MalformedJsonError",
    "MissingCredentialError",
    "ProviderAuthError",
    "ProviderFailureError",
    "ProviderRateLimitError",
    "SchemaViolation",
    "SectionConfig",
    "build_service",
    "generate_blueprint",
    "probe_connection",
    "vault_clear",
    "vault_load",
    "vault_save",
]
