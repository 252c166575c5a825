"""
Sticky inputs — remembered calculator inputs between sessions.

Each calculator keeps its last form values under `<prefix><calculator>` in a
key-value store. Snapshots are validated against the calculator's JSON Schema
contract on the way in and on the way out:

- save() rejects invalid data with jsonschema.ValidationError
- load() discards an invalid stored snapshot (WARNING) and returns defaults

A stored snapshot is merged over the caller's defaults, so fields added to a
form later still get their default value.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional, Protocol

from fintoolkit.core.contracts.validators import CalculatorInputsValidator

logger = logging.getLogger(__name__)

# Key prefix; bump when a form's fields change incompatibly
SNAPSHOT_KEY_PREFIX: Final[str] = "v3_"


# =============================================================================
# KEY-VALUE STORES
# =============================================================================


class KeyValueStore(Protocol):
    """Persistence collaborator holding JSON-compatible values by key."""

    def get(self, key: str) -> Optional[Any]:
        """Stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...


class InMemoryStore:
    """Process-local store, e.g. one per test or per UI session."""

    def __init__(self, initial: Dict[str, Any] | None = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by a single JSON object on disk.

    The file is read on every get() and rewritten on every set(); a missing
    file reads as an empty store.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must contain a JSON object, got {type(data).__name__}")
        return data

    def get(self, key: str) -> Optional[Any]:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)


# =============================================================================
# SNAPSHOT REPOSITORY
# =============================================================================


class InputSnapshotRepository:
    """
    Validated load/save of calculator input snapshots.

    Args:
        store: Any KeyValueStore
        prefix: Key prefix (default: SNAPSHOT_KEY_PREFIX)

    Examples:
        >>> repo = InputSnapshotRepository(InMemoryStore())
        >>> repo.save("dca", {"monthly_amount": 10000, "annual_rate_pct": 6, "years": 20})
        >>> repo.load("dca", {"years": 10})["years"]
        20
    """

    def __init__(self, store: KeyValueStore, prefix: str = SNAPSHOT_KEY_PREFIX):
        self.store = store
        self.prefix = prefix

    def key_for(self, calculator: str) -> str:
        return f"{self.prefix}{calculator}"

    def load(self, calculator: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """
        Defaults overlaid with the stored snapshot, if it is valid.

        Raises:
            ValueError: unknown calculator
        """
        validator = CalculatorInputsValidator(calculator)
        key = self.key_for(calculator)
        stored = self.store.get(key)

        if stored is None:
            return dict(defaults)

        if not isinstance(stored, dict) or not validator.is_valid(stored):
            logger.warning("Discarding invalid input snapshot %r; using defaults", key)
            return dict(defaults)

        merged = dict(defaults)
        merged.update(stored)
        return merged

    def save(self, calculator: str, inputs: Dict[str, Any]) -> None:
        """
        Validate and persist a snapshot.

        Raises:
            ValueError: unknown calculator
            jsonschema.ValidationError: if inputs do not match the contract
        """
        CalculatorInputsValidator(calculator).validate(inputs)

        key = self.key_for(calculator)
        self.store.set(key, dict(inputs))
        logger.debug("Saved input snapshot %r", key)
