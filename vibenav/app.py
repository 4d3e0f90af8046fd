"""Wiring and the caller-facing API."""

from typing import Callable

from . import config
from .clients import GeminiClient, LLMClient
from .clients.base import Provider
from .models import Blueprint, GenerationRequest
from .services import (
    BlueprintGenerator,
    BlueprintService,
    ConnectionProbe,
    CredentialSource,
    CredentialVault,
    EnvironmentCredential,
    HostCredential,
    PromptComposer,
    UserCredential,
)


def build_provider(name: str = config.PROVIDER) -> Provider:
    if name == "gemini":
        return GeminiClient(timeout_seconds=config.REQUEST_TIMEOUT_SECONDS)
    if name == "openai":
        return LLMClient(timeout_seconds=config.REQUEST_TIMEOUT_SECONDS)
    raise ValueError(f"Unknown provider: {name}")


def default_models(provider_name: str = config.PROVIDER) -> tuple[str, str]:
    """Return (blueprint model, probe model) for a provider."""
    if provider_name == "openai":
        return config.OPENAI_BLUEPRINT_MODEL, config.OPENAI_PROBE_MODEL
    return config.BLUEPRINT_MODEL, config.PROBE_MODEL


def build_vault() -> CredentialVault:
    return CredentialVault(config.VAULT_PATH, key=config.VAULT_KEY)


def build_credential_source(
    mode: str,
    probe: ConnectionProbe,
    host_supplier: Callable[[], str | None] | None = None,
    provider_name: str = config.PROVIDER,
) -> CredentialSource:
    """Select the credential source for this deployment mode."""
    if mode == "env":
        return EnvironmentCredential("OPENAI_API_KEY" if provider_name == "openai" else "GEMINI_API_KEY")
    if mode == "user":
        source = UserCredential(build_vault(), probe)
        source.restore()
        return source
    if mode == "host":
        if host_supplier is None:
            raise ValueError("Host credential mode requires a supplier")
        return HostCredential(host_supplier)
    raise ValueError(f"Unknown credential mode: {mode}")


def build_service(
    mode: str = config.CREDENTIAL_MODE,
    provider_name: str = config.PROVIDER,
    host_supplier: Callable[[], str | None] | None = None,
) -> BlueprintService:
    provider = build_provider(provider_name)
    blueprint_model, probe_model = default_models(provider_name)
    probe = ConnectionProbe(provider, model=probe_model)
    generator = BlueprintGenerator(
        provider,
        model=blueprint_model,
        composer=PromptComposer(locale=config.TARGET_LOCALE),
    )
    source = build_credential_source(mode, probe, host_supplier, provider_name)
    return BlueprintService(source, generator, probe)


# ===== Caller-facing API =====

def probe_connection(credential: str | None) -> bool:
    """Check a credential with one cheap call. Never raises."""
    provider = build_provider()
    _, probe_model = default_models()
    return ConnectionProbe(provider, model=probe_model).probe(credential)


def generate_blueprint(credential: str | None, request: GenerationRequest) -> Blueprint:
    """Generate one blueprint. Raises a BlueprintError subclass on failure."""
    provider = build_provider()
    blueprint_model, _ = default_models()
    generator = BlueprintGenerator(
        provider,
        model=blueprint_model,
        composer=PromptComposer(locale=config.TARGET_LOCALE),
    )
    return generator.generate(credential, request)


def vault_save(secret: str) -> None:
    build_vault().save(secret)


def vault_load() -> str | None:
    return build_vault().load()


def vault_clear() -> None:
    build_vault().clear()
