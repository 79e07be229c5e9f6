"""Recursive key transformation between camelCase and snake_case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ._convert import Direction, convert_key
from .const import DEFAULT_MAX_DEPTH
from .exceptions import NestingTooDeepError

_LOGGER = logging.getLogger(__name__)


def is_plain_container(value: Any) -> bool:
    """Return True for key/value mappings, False for lists, None and scalars."""
    return isinstance(value, Mapping)


def rekey(
    value: Any,
    direction: Direction,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Any:
    """Return a copy of ``value`` with every mapping key converted.

    Mappings are rebuilt as dicts in their original key order, lists and
    tuples element-wise; namedtuples keep their type. Everything else, including strings that look like
    identifiers, is returned as is. A key that cannot be converted (any
    non-string key) is kept unchanged while its value is still processed.
    When two keys convert to the same name, the later one wins.

    Args:
        value: Any decoded payload: mappings, lists, tuples or scalars.
        direction: Target convention, a ``Direction`` or its string value.
        max_depth: How many container levels below ``value`` may be entered.

    Raises:
        NestingTooDeepError: If ``value`` is nested deeper than ``max_depth``.
    """
    return _rekey(value, Direction(direction), 0, max_depth)


def _rekey(value: Any, direction: Direction, depth: int, max_depth: int) -> Any:
    if value is None:
        return value

    if isinstance(value, (list, tuple)):
        if depth > max_depth:
            raise NestingTooDeepError(max_depth)
        items: list[Any] = []
        for item in value:
            items.append(_rekey(item, direction, depth + 1, max_depth))
        if isinstance(value, list):
            return items
        if hasattr(value, "_fields"):
            return type(value)._make(items)
        return tuple(items)

    if is_plain_container(value):
        if depth > max_depth:
            raise NestingTooDeepError(max_depth)
        result: dict[Any, Any] = {}
        for key, item in value.items():
            conversion = convert_key(key, direction)
            if not conversion.converted:
                _LOGGER.debug("Keeping unconvertible key %r unchanged", key)
            result[conversion.key] = _rekey(item, direction, depth + 1, max_depth)
        return result

    return value


def camel_case_keys(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Recursively convert all mapping keys to camelCase.

    Example::

        camel_case_keys({"user_name": "John", "is_active": True})
        # {"userName": "John", "isActive": True}
    """
    return rekey(value, Direction.TO_CAMEL, max_depth=max_depth)


def snake_case_keys(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Recursively convert all mapping keys to snake_case."""
    return rekey(value, Direction.TO_SNAKE, max_depth=max_depth)
