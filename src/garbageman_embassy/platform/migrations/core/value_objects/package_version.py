"""Package version value object.

ONLY version ordering - dotted numeric versions as the host records them
(``0.1.0.1``). Trailing zero components do not change the version, so
``0.2`` and ``0.2.0.0`` compare equal.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

_VERSION_RE = re.compile(r"^\d+(\.\d+)*$")


@total_ordering
@dataclass(frozen=True, eq=False)
class PackageVersion:
    """Immutable, totally ordered package version."""

    raw: str
    parts: Tuple[int, ...]

    @classmethod
    def parse(cls, value: str) -> "PackageVersion":
        if not isinstance(value, str) or not _VERSION_RE.match(value.strip()):
            raise ValueError(f"Invalid package version: {value!r}")
        value = value.strip()
        return cls(raw=value, parts=tuple(int(part) for part in value.split(".")))

    @property
    def _key(self) -> Tuple[int, ...]:
        parts = list(self.parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return tuple(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: "PackageVersion") -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.raw
