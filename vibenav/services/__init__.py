"""Business logic services."""

from .blueprint import BlueprintGenerator, BlueprintService
from .credentials import CredentialSource, EnvironmentCredential, HostCredential, UserCredential
from .extractor import extract_json
from .probe import ConnectionProbe
from .prompts import PromptComposer
from .schema import BLUEPRINT_CONTRACT, SchemaContract, SchemaField
from .vault import CredentialVault

__all__ = [
    "BLUEPRINT_CONTRACT",
    "BlueprintGenerator",
    "BlueprintService",
    "ConnectionProbe",
    "CredentialSource",
    "CredentialVault",
    "EnvironmentCredential",
    "HostCredential",
    "PromptComposer",
    "SchemaContract",
    "SchemaField",
    "UserCredential",
    "extract_json",
]
