"""Credential sources - one capability, three deployment modes."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Callable

from .probe import ConnectionProbe
from .vault import CredentialVault

logger = logging.getLogger(__name__)


class CredentialSource(ABC):
    """Where the active credential comes from."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the active credential, or None if there is none."""

    @abstractmethod
    def invalidate(self) -> None:
        """Stop handing out the current credential (e.g. after an auth failure)."""


class EnvironmentCredential(CredentialSource):
    """Credential provided through an environment variable (.env supported)."""

    def __init__(self, env_var: str = "GEMINI_API_KEY"):
        self.env_var = env_var
        self._invalidated = False

    def get(self) -> str | None:
        if self._invalidated:
            return None
        return os.getenv(self.env_var) or None

    def invalidate(self) -> None:
        logger.warning(f"Credential from ${self.env_var} rejected, disabled for this process")
        self._invalidated = True


class HostCredential(CredentialSource):
    """Credential injected by the host runtime through a supplier callable."""

    def __init__(self, supplier: Callable[[], str | None]):
        self.supplier = supplier
        self._rejected: str | None = None

    def get(self) -> str | None:
        credential = self.supplier() or None
        if credential is not None and credential == self._rejected:
            return None
        return credential

    def invalidate(self) -> None:
        # Host may hand out a new key later; only the rejected one is blocked
        self._rejected = self.supplier() or None


class UserCredential(CredentialSource):
    """
    Credential typed in by the user.

    Lifecycle: entered -> probed -> saved to the vault -> used until cleared
    or replaced. Only a probed credential is returned by get().
    """

    def __init__(self, vault: CredentialVault, probe: ConnectionProbe):
        self.vault = vault
        self.probe = probe
        self._secret: str | None = None
        self._validated = False

    def restore(self) -> bool:
        """Load a previously stored credential and probe it. Call at startup."""
        secret = self.vault.load()
        if not secret:
            return False
        self._secret = secret
        self._validated = self.probe.probe(secret)
        if not self._validated:
            logger.warning("Stored credential failed the connection test")
        return self._validated

    def revalidate(self) -> bool:
        """Re-run the connection test on the held credential (vault value if none is held)."""
        if not self._secret:
            return self.restore()
        self._validated = self.probe.probe(self._secret)
        if not self._validated:
            logger.warning("Held credential failed the connection test")
        return self._validated

    def submit(self, secret: str) -> bool:
        """Probe a newly entered credential; persist it only if it works."""
        secret = secret.strip()
        if not self.probe.probe(secret):
            return False
        self.vault.save(secret)
        self._secret = secret
        self._validated = True
        return True

    def clear(self) -> None:
        self.vault.clear()
        self._secret = None
        self._validated = False

    @property
    def is_validated(self) -> bool:
        return self._validated

    def get(self) -> str | None:
        return self._secret if self._validated else None

    def invalidate(self) -> None:
        # Stored value is kept so the user can re-validate without retyping
        self._validated = False
