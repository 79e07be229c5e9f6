"""Recursive camelCase / snake_case key conversion for decoded payloads."""

from .const import __version__
from ._convert import (
    Direction,
    KeyConversion,
    convert_key,
    to_camel_case,
    to_snake_case,
)
from ._serialization import camel_case_keys, is_plain_container, rekey, snake_case_keys
from .exceptions import InvalidInputError, KeyCaseError, NestingTooDeepError

__all__ = [
    "__version__",
    "camel_case_keys",
    "snake_case_keys",
    "rekey",
    "Direction",
    "KeyConversion",
    "convert_key",
    "to_camel_case",
    "to_snake_case",
    "is_plain_container",
    "InvalidInputError",
    "KeyCaseError",
    "NestingTooDeepError",
]
