"""Option value validation.

ONLY value validation - a single recursive dispatch on the option's constraint
payload. Validation is pure: the candidate is never modified and the returned
value is a fresh copy for object options.
"""

import math
from collections.abc import Mapping
from functools import partial
from typing import Any, Callable, Dict, Iterable

from .....core.exceptions import ValidationError
from ...core.entities.option import Option
from ...core.value_objects.constraints import (
    BooleanConstraints,
    EnumConstraints,
    NumberConstraints,
    ObjectConstraints,
    StringConstraints,
)


def join_path(parent: str, key: Any) -> str:
    """Build a dotted option path."""
    return f"{parent}.{key}" if parent else str(key)


def _validate_number(option: Option, value: Any, path: str) -> Any:
    constraints: NumberConstraints = option.constraints

    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError.wrong_type(path, "number", value)
    # ints compare exactly against the bounds; only floats can be non-finite
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError.wrong_type(path, "finite number", value)
    if constraints.integral and isinstance(value, float) and not value.is_integer():
        raise ValidationError.not_integral(path, value)
    if not constraints.range.contains(value):
        raise ValidationError.out_of_range(path, value, str(constraints.range))
    return value


def _validate_string(option: Option, value: Any, path: str) -> Any:
    constraints: StringConstraints = option.constraints

    if not isinstance(value, str):
        raise ValidationError.wrong_type(path, "string", value)
    if value == "":
        if option.required:
            raise ValidationError.missing_required(path)
        return value
    if not constraints.matches(value):
        raise ValidationError.pattern_mismatch(path, constraints.pattern, constraints.pattern_description)
    return value


def _validate_boolean(option: Option, value: Any, path: str) -> Any:
    if not isinstance(value, bool):
        raise ValidationError.wrong_type(path, "boolean", value)
    return value


def _validate_enum(option: Option, value: Any, path: str) -> Any:
    constraints: EnumConstraints = option.constraints

    if not isinstance(value, str) or value not in constraints.values:
        raise ValidationError.not_a_member(path, value, list(constraints.values))
    return value


def _validate_object(option: Option, value: Any, path: str) -> Any:
    constraints: ObjectConstraints = option.constraints
    return validate_options(constraints.options, value, path)


_VALIDATORS = {
    NumberConstraints: _validate_number,
    StringConstraints: _validate_string,
    BooleanConstraints: _validate_boolean,
    EnumConstraints: _validate_enum,
    ObjectConstraints: _validate_object,
}


def validate_option(option: Option, value: Any, path: str = "") -> Any:
    """Validate a value against one option.

    Args:
        option: Option declaration
        value: Candidate value (``None`` means absent)
        path: Dotted path of the option, defaults to the option key

    Returns:
        The validated value

    Raises:
        ValidationError: With the path and kind of the first failure
    """
    path = path or option.key

    if value is None:
        if option.required:
            raise ValidationError.missing_required(path)
        return None

    return _VALIDATORS[type(option.constraints)](option, value, path)


def validate_options(options: Iterable[Option], value: Any, path: str = "") -> Dict[str, Any]:
    """Validate a mapping against a set of sibling options.

    Declared options are checked in declaration order before undeclared keys
    are rejected, so the first reported error follows display order.
    """
    if not isinstance(value, Mapping):
        raise ValidationError.wrong_type(path, "object", value)

    options = tuple(options)
    validated = {}
    for option in options:
        validated[option.key] = validate_option(option, value.get(option.key), join_path(path, option.key))

    declared = {option.key for option in options}
    for key in value:
        if key not in declared:
            raise ValidationError.unknown_key(join_path(path, key))

    return validated


def validator_for(option: Option) -> Callable[[Any], Any]:
    """Produce a standalone validate(value) function for an option."""
    return partial(validate_option, option, path=option.key)
