"""Outcome of a successful configuration change."""

from dataclasses import dataclass, field
from typing import Dict, List

from .....config.constants import RESTART_SIGNAL


@dataclass(frozen=True)
class ConfigApplied:
    """Advisory restart signal returned to the host.

    The host decides whether to act on ``signal``; nothing here restarts a
    service. ``changed_keys`` lists dotted paths only, never values.
    """

    changed_keys: List[str] = field(default_factory=list)
    signal: str = RESTART_SIGNAL
    depends_on: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def restart_recommended(self) -> bool:
        return bool(self.changed_keys)
