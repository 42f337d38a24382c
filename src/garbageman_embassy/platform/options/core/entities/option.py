"""Option domain entity.

A single named, typed, constrained configuration field. The constraint payload
is the variant tag: a ``NumberConstraints`` payload makes a number option, an
``ObjectConstraints`` payload makes a group of nested options, and so on.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Union

from .....config.constants import REDACTED_PLACEHOLDER
from .....core.exceptions import SchemaDefinitionError
from ..value_objects.constraints import (
    BooleanConstraints,
    EnumConstraints,
    NumberConstraints,
    ObjectConstraints,
    OptionKind,
    StringConstraints,
)
from ..value_objects.number_range import NumberRange

Constraints = Union[
    NumberConstraints,
    StringConstraints,
    BooleanConstraints,
    EnumConstraints,
    ObjectConstraints,
]


@dataclass(frozen=True)
class Option:
    """Declarative configuration option."""

    key: str
    name: str
    constraints: Constraints
    description: Optional[str] = None
    required: bool = True
    default: Any = None
    sensitive: bool = False
    warning: Optional[str] = None

    def __post_init__(self):
        if not self.key:
            raise SchemaDefinitionError("Option key cannot be empty")
        if "." in self.key:
            raise SchemaDefinitionError(f"Option key cannot contain '.': {self.key}")

    @property
    def kind(self) -> OptionKind:
        return self.constraints.kind

    @property
    def children(self) -> tuple:
        """Nested options of an object option; empty for every other kind."""
        if isinstance(self.constraints, ObjectConstraints):
            return self.constraints.options
        return ()

    # Declaration helpers

    @classmethod
    def number(
        cls,
        key: str,
        name: str,
        *,
        default: Any = None,
        range: Union[str, NumberRange, None] = None,
        integral: bool = False,
        units: Optional[str] = None,
        **kwargs
    ) -> "Option":
        if isinstance(range, str):
            range = NumberRange.parse(range)
        constraints = NumberConstraints(
            range=range or NumberRange.unbounded(),
            integral=integral,
            units=units,
        )
        return cls(key=key, name=name, constraints=constraints, default=default, **kwargs)

    @classmethod
    def string(
        cls,
        key: str,
        name: str,
        *,
        default: Any = None,
        pattern: Optional[str] = None,
        pattern_description: Optional[str] = None,
        placeholder: Optional[str] = None,
        copyable: bool = False,
        **kwargs
    ) -> "Option":
        constraints = StringConstraints(
            pattern=pattern,
            pattern_description=pattern_description,
            placeholder=placeholder,
            copyable=copyable,
        )
        return cls(key=key, name=name, constraints=constraints, default=default, **kwargs)

    @classmethod
    def boolean(cls, key: str, name: str, *, default: bool = False, **kwargs) -> "Option":
        return cls(key=key, name=name, constraints=BooleanConstraints(), default=default, **kwargs)

    @classmethod
    def enum(
        cls,
        key: str,
        name: str,
        *,
        values: Iterable[str],
        default: Any = None,
        value_names: Optional[Dict[str, str]] = None,
        **kwargs
    ) -> "Option":
        constraints = EnumConstraints(values=tuple(values), value_names=dict(value_names or {}))
        return cls(key=key, name=name, constraints=constraints, default=default, **kwargs)

    @classmethod
    def object(cls, key: str, name: str, *, spec: Iterable["Option"], **kwargs) -> "Option":
        """Group nested options; the default is assembled from the children."""
        return cls(key=key, name=name, constraints=ObjectConstraints(options=tuple(spec)), **kwargs)

    def default_value(self) -> Any:
        """Default for this option, assembled recursively for objects."""
        if isinstance(self.constraints, ObjectConstraints):
            return {child.key: child.default_value() for child in self.constraints.options}
        return self.default

    def describe(self) -> Dict[str, Any]:
        """Serialize the option in the host's spec vocabulary."""
        spec: Dict[str, Any] = {"type": self.kind.value, "name": self.name}
        if self.description is not None:
            spec["description"] = self.description

        c = self.constraints
        if isinstance(c, NumberConstraints):
            spec["nullable"] = not self.required
            spec["range"] = str(c.range)
            spec["integral"] = c.integral
            if c.units is not None:
                spec["units"] = c.units
        elif isinstance(c, StringConstraints):
            spec["nullable"] = not self.required
            spec["masked"] = self.sensitive
            spec["copyable"] = c.copyable
            if c.pattern is not None:
                spec["pattern"] = c.pattern
                spec["pattern-description"] = c.pattern_description or ""
            if c.placeholder is not None:
                spec["placeholder"] = c.placeholder
        elif isinstance(c, EnumConstraints):
            spec["values"] = list(c.values)
            spec["value-names"] = {value: c.label_for(value) for value in c.values}
        elif isinstance(c, ObjectConstraints):
            spec["spec"] = {child.key: child.describe() for child in c.options}

        if not isinstance(c, ObjectConstraints):
            masked_default = self.sensitive and self.default not in (None, "")
            spec["default"] = REDACTED_PLACEHOLDER if masked_default else self.default
        if self.warning is not None:
            spec["warning"] = self.warning
        return spec

    def __repr__(self) -> str:
        flags = []
        if self.required:
            flags.append("required")
        if self.sensitive:
            flags.append("sensitive")
        flag_info = f" [{', '.join(flags)}]" if flags else ""
        return f"Option({self.key}, kind={self.kind.value}{flag_info})"
