"""
Query parameter extraction with typed conversion.

Query strings are parsed as application/x-www-form-urlencoded
(``key1=val1&key2=val2``, percent-decoded, ``+`` as space, blank values
kept). When a key is repeated, the FIRST occurrence wins, left to right:
``?a=1&a=2`` yields ``"1"`` for ``a``.

Conversions are strict: ``int`` accepts an optional sign and ASCII
digits, ``float`` rejects surrounding whitespace and ``_`` separators,
``bool`` accepts exactly ``true``/``false``. Neither numeric type
accepts non-ASCII digits. The target defaults to ``str``; any other
callable may be passed, and a ValueError, TypeError or ArithmeticError
from it is reported as an invalid parameter.
"""

import re
from collections.abc import Callable
from typing import Any, TypeVar

from starlette.requests import Request

from hyperactive.domain.errors import InvalidParameterFormatError, MissingParameterError

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid digit found in {raw!r}")
    return int(raw)


def _parse_float(raw: str) -> float:
    if not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid float literal {raw!r}")
    return float(raw)


def _parse_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValueError(f"provided string was not `true` or `false`: {raw!r}")


_CANONICAL_PARSERS: dict[Any, Callable[[str], Any]] = {
    int: _parse_int,
    float: _parse_float,
    bool: _parse_bool,
    str: str,
}


def _type_name(target: Callable[[str], Any]) -> str:
    return getattr(target, "__name__", repr(target))


def _first_value(request: Request, name: str) -> str | None:
    values = request.query_params.getlist(name)
    if not values:
        return None
    return values[0]


def _convert(name: str, raw: str, target: Callable[[str], T]) -> T:
    parse = _CANONICAL_PARSERS.get(target, target)
    try:
        return parse(raw)
    except (ValueError, TypeError, ArithmeticError) as exc:
        raise InvalidParameterFormatError(name, raw, _type_name(target)) from exc


def get_query(request: Request) -> dict[str, str]:
    """Gather all query parameters into a dict.

    Args:
        request: The incoming request.

    Returns:
        Mapping of key to decoded value; repeated keys keep their first value.
    """
    query: dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        query.setdefault(key, value)
    return query


def get_query_opt_param(request: Request, name: str, target: Callable[[str], T] = str) -> T | None:
    """Look up an optional query parameter and convert it.

    Example:
        page_no = get_query_opt_param(request, "page_no", int)

    Args:
        request: The incoming request.
        name: The query key.
        target: Target type (int, float, bool, str) or any converter callable.

    Returns:
        The converted value, or None if the key is absent.

    Raises:
        InvalidParameterFormatError: If the value cannot be converted.
    """
    raw = _first_value(request, name)
    if raw is None:
        return None
    return _convert(name, raw, target)


def get_query_param(request: Request, name: str, target: Callable[[str], T] = str) -> T:
    """Look up a required query parameter and convert it.

    Example:
        user_id = get_query_param(request, "user_id", int)

    Raises:
        MissingParameterError: If the key is absent.
        InvalidParameterFormatError: If the value cannot be converted.
    """
    raw = _first_value(request, name)
    if raw is None:
        raise MissingParameterError(name)
    return _convert(name, raw, target)
