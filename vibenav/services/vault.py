"""Obfuscated local storage for a single API credential.

The stored value is the base64 encoding of the secret with its characters
reversed. This keeps the key from being readable at a glance in the store
file. It is NOT encryption: anyone with access to the file can recover it.
"""

import base64
import binascii
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


def obfuscate(secret: str) -> str:
    return base64.b64encode(secret.encode("utf-8", "surrogatepass")).decode("ascii")[::-1]


def deobfuscate(stored: str) -> str:
    """Reverse obfuscate(). Raises ValueError on anything undecodable."""
    try:
        return base64.b64decode(stored[::-1], validate=True).decode("utf-8", "surrogatepass")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Stored credential is not decodable: {e}") from e


class CredentialVault:
    """Save/load/clear one credential under a fixed key in a JSON store file."""

    def __init__(self, path: str | Path, key: str = "_aimb_vault"):
        self.path = Path(path)
        self.key = key
        self._lock = threading.Lock()

    def save(self, secret: str) -> None:
        """Store the credential, replacing any previous one."""
        if not secret:
            raise ValueError("Cannot store an empty credential")
        with self._lock:
            store = self._read_store()
            store[self.key] = obfuscate(secret)
            self._write_store(store)

    def load(self) -> str | None:
        """Return the stored credential, or None if absent or corrupt."""
        with self._lock:
            encoded = self._read_store().get(self.key)
        if not encoded or not isinstance(encoded, str):
            return None
        try:
            secret = deobfuscate(encoded)
        except ValueError:
            logger.warning(f"Ignoring undecodable credential in {self.path}")
            return None
        return secret or None

    def clear(self) -> None:
        """Remove the stored credential. Safe to call when nothing is stored."""
        with self._lock:
            store = self._read_store()
            if self.key not in store:
                return
            del store[self.key]
            self._write_store(store)

    def _read_store(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable credential store {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_store(self, store: dict) -> None:
        """Write to a temp file in the same directory, then swap it into place."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".vault-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(store, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
