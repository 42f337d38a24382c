"""Number range value object.

ONLY numeric bounds - parses and evaluates the host's interval notation
(``[1024,65535]``, ``(0,1]``, ``[5,*)``).
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from .....core.exceptions import SchemaDefinitionError

Number = Union[int, float]

_BOUND = r"\*|-?\d+(?:\.\d+)?"
_RANGE_RE = re.compile(
    rf"^\s*(?P<open>[\[(])\s*(?P<low>{_BOUND})\s*,\s*(?P<high>{_BOUND})\s*(?P<close>[\])])\s*$"
)


def _parse_bound(raw: str) -> Optional[Number]:
    if raw == "*":
        return None
    return float(raw) if "." in raw else int(raw)


@dataclass(frozen=True)
class NumberRange:
    """Immutable numeric interval; ``None`` marks an unbounded side."""

    low: Optional[Number] = None
    high: Optional[Number] = None
    low_inclusive: bool = True
    high_inclusive: bool = True

    def __post_init__(self):
        if self.low is not None and self.high is not None and self.low > self.high:
            raise SchemaDefinitionError(f"Range lower bound {self.low} exceeds upper bound {self.high}")

    @classmethod
    def parse(cls, notation: str) -> "NumberRange":
        """Parse interval notation into a range."""
        match = _RANGE_RE.match(notation)
        if not match:
            raise SchemaDefinitionError(f"Malformed range notation: {notation!r}")

        return cls(
            low=_parse_bound(match.group("low")),
            high=_parse_bound(match.group("high")),
            low_inclusive=match.group("open") == "[",
            high_inclusive=match.group("close") == "]",
        )

    @classmethod
    def unbounded(cls) -> "NumberRange":
        return cls()

    def contains(self, value: Number) -> bool:
        """Check whether a finite number lies inside the interval."""
        if isinstance(value, float) and not math.isfinite(value):
            return False

        if self.low is not None:
            if value < self.low or (value == self.low and not self.low_inclusive):
                return False

        if self.high is not None:
            if value > self.high or (value == self.high and not self.high_inclusive):
                return False

        return True

    def __str__(self) -> str:
        low = "*" if self.low is None else str(self.low)
        high = "*" if self.high is None else str(self.high)
        opening = "[" if self.low_inclusive else "("
        closing = "]" if self.high_inclusive else ")"
        return f"{opening}{low},{high}{closing}"
