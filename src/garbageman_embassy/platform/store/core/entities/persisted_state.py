"""Persisted state entity.

The single blob the host keeps for the package: the last-applied configuration
value and the package version it was written by.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class PersistedState:
    """Versioned configuration value as stored by the host."""

    version: str
    config: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"version": self.version, "config": copy.deepcopy(self.config)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedState":
        config = data.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Persisted config must be a mapping, got {type(config).__name__}")
        return cls(version=str(data["version"]), config=copy.deepcopy(config))
