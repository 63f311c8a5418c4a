"""Interning table mapping secret texts to compact integer IDs."""

from __future__ import annotations

import threading


class SecretRegistry:
    """Stores each text once; ID 0 is reserved as invalid."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._secrets: dict[int, str] = {}
        self._reverse: dict[str, int] = {}
        self._next_id = 1

    def register_secret(self, text: str) -> int:
        """Return the ID of text, assigning a new one on first sight."""
        with self._lock:
            existing = self._reverse.get(text)
            if existing is not None:
                return existing
            secret_id = self._next_id
            self._secrets[secret_id] = text
            self._reverse[text] = secret_id
            self._next_id += 1
            return secret_id

    def get_secret(self, secret_id: int) -> str | None:
        """The text registered under secret_id, or None if unknown."""
        with self._lock:
            return self._secrets.get(secret_id)


_registry: SecretRegistry | None = None
_registry_lock = threading.Lock()


def get_secret_registry() -> SecretRegistry:
    """The process-wide registry, created on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = SecretRegistry()
        return _registry