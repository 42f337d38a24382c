"""Option type registry.

Option kinds, their constraint payloads, and the recursive validator that
turns a declaration into a ``validate(value)`` function.
"""

from .core.entities.option import Option, Constraints
from .core.value_objects.constraints import (
    OptionKind,
    NumberConstraints,
    StringConstraints,
    BooleanConstraints,
    EnumConstraints,
    ObjectConstraints,
)
from .core.value_objects.number_range import NumberRange
from .application.validators.option_validator import (
    validate_option,
    validate_options,
    validator_for,
    join_path,
)
from .application.masking import mask_value

__all__ = [
    "Option",
    "Constraints",
    "OptionKind",
    "NumberConstraints",
    "StringConstraints",
    "BooleanConstraints",
    "EnumConstraints",
    "ObjectConstraints",
    "NumberRange",
    "validate_option",
    "validate_options",
    "validator_for",
    "join_path",
    "mask_value",
]
