"""Sensitive value masking for every display path."""

from typing import Any

from ....config.constants import REDACTED_PLACEHOLDER
from ..core.entities.option import Option


def mask_value(option: Option, value: Any) -> Any:
    """Get value with sensitive data masked.

    Absent values stay absent so the display can still show "not set".
    """
    if option.sensitive and value not in (None, ""):
        return REDACTED_PLACEHOLDER
    return value
