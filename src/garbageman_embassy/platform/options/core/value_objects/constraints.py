"""Option constraint value objects.

ONLY kind-specific constraint payloads - each option kind carries exactly one
of these, and the payload type determines the option kind.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from .....core.exceptions import SchemaDefinitionError
from .number_range import NumberRange

if TYPE_CHECKING:
    from ..entities.option import Option


class OptionKind(str, Enum):
    """Option kinds understood by the host."""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ENUM = "enum"
    OBJECT = "object"


@dataclass(frozen=True)
class NumberConstraints:
    """Numeric range with integral flag and optional unit label."""

    range: NumberRange = field(default_factory=NumberRange.unbounded)
    integral: bool = False
    units: Optional[str] = None

    kind = OptionKind.NUMBER


@dataclass(frozen=True)
class StringConstraints:
    """Regular expression with its human-readable description."""

    pattern: Optional[str] = None
    pattern_description: Optional[str] = None
    placeholder: Optional[str] = None
    copyable: bool = False

    kind = OptionKind.STRING

    def __post_init__(self):
        if self.pattern is None:
            return
        try:
            re.compile(self.pattern)
        except re.error as e:
            raise SchemaDefinitionError(f"Invalid pattern {self.pattern!r}: {e}")

    def matches(self, value: str) -> bool:
        """Check that the whole value matches the pattern."""
        if self.pattern is None:
            return True
        return re.fullmatch(self.pattern, value) is not None


@dataclass(frozen=True)
class BooleanConstraints:
    """Booleans carry no constraints beyond their type."""

    kind = OptionKind.BOOLEAN


@dataclass(frozen=True)
class EnumConstraints:
    """Closed set of allowed values with display labels."""

    values: Tuple[str, ...] = ()
    value_names: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    kind = OptionKind.ENUM

    def __post_init__(self):
        if not self.values:
            raise SchemaDefinitionError("Enum options must declare at least one value")
        if len(set(self.values)) != len(self.values):
            raise SchemaDefinitionError(f"Enum values must be unique: {list(self.values)}")
        unknown = set(self.value_names) - set(self.values)
        if unknown:
            raise SchemaDefinitionError(f"Display labels given for undeclared values: {sorted(unknown)}")

    def label_for(self, value: str) -> str:
        return self.value_names.get(value, value)


@dataclass(frozen=True)
class ObjectConstraints:
    """Nested option set; keys are unique within this level."""

    options: Tuple["Option", ...] = ()

    kind = OptionKind.OBJECT

    def __post_init__(self):
        seen = set()
        for option in self.options:
            if option.key in seen:
                raise SchemaDefinitionError(f"Duplicate option key at the same level: {option.key}")
            seen.add(option.key)

    def get(self, key: str) -> Optional["Option"]:
        for option in self.options:
            if option.key == key:
                return option
        return None

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(option.key for option in self.options)
