"""Single-key conversion between snake_case and camelCase."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

from .const import CAMEL_TO_SNAKE_PATTERN, SNAKE_TO_CAMEL_PATTERN
from .exceptions import InvalidInputError


class Direction(str, enum.Enum):
    """Naming convention a rekey operation targets."""

    TO_CAMEL = "camel"
    TO_SNAKE = "snake"


@dataclass(frozen=True)
class KeyConversion:
    """Outcome of converting one key.

    ``converted`` is False when the key was not a string; ``key`` then holds
    the original key untouched.
    """

    key: Any
    converted: bool


def _camelize(key: str) -> str:
    return SNAKE_TO_CAMEL_PATTERN.sub(lambda m: m.group(1).upper(), key)


def _snakify(key: str) -> str:
    result = CAMEL_TO_SNAKE_PATTERN.sub(lambda m: f"_{m.group(0).lower()}", key)
    if CAMEL_TO_SNAKE_PATTERN.match(key):
        return result[1:]
    return result


_CONVERTERS: dict[Direction, Callable[[str], str]] = {
    Direction.TO_CAMEL: _camelize,
    Direction.TO_SNAKE: _snakify,
}


def convert_key(key: Any, direction: Direction) -> KeyConversion:
    """Convert ``key`` towards ``direction`` without raising for bad keys."""
    if not isinstance(key, str):
        return KeyConversion(key=key, converted=False)
    return KeyConversion(key=_CONVERTERS[Direction(direction)](key), converted=True)


def _convert_or_raise(key: Any, direction: Direction) -> str:
    result = convert_key(key, direction)
    if not result.converted:
        raise InvalidInputError(key)
    return result.key


def to_camel_case(key: str) -> str:
    """Convert a snake_case string to camelCase.

    Each underscore followed by an ASCII letter is dropped and the letter is
    upper-cased. Other underscores are kept, so ``"a__b"`` becomes ``"a_B"``
    and ``"v_2"`` stays ``"v_2"``.

    Example::

        to_camel_case("user_name")  # "userName"

    Raises:
        InvalidInputError: If ``key`` is not a string.
    """
    return _convert_or_raise(key, Direction.TO_CAMEL)


def to_snake_case(key: str) -> str:
    """Convert a camelCase string to snake_case.

    Every upper-case ASCII letter becomes an underscore plus its lower-case
    form, one underscore per capital. Acronyms are not grouped:
    ``"XMLHttpRequest"`` becomes ``"x_m_l_http_request"``. The underscore
    produced by a leading capital is stripped; an underscore the key already
    started with is not.

    Raises:
        InvalidInputError: If ``key`` is not a string.
    """
    return _convert_or_raise(key, Direction.TO_SNAKE)
