"""Utility helpers shared by the option builders and the site loader."""

from __future__ import annotations

import collections.abc as cabc
import math
import typing as typ

from .._constants import DEFAULT_CONTENT_LENGTH
from .models import SiteConfigError

_FALSE_WORDS = frozenset({"", "0", "false", "off", "no"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _choice(value: object | None, allowed: cabc.Sequence[str], default: str) -> str:
    """Return ``value`` normalized to one of ``allowed`` or ``default``."""
    text = _optional_str(value)
    if text is None:
        return default
    lowered = text.lower()
    return lowered if lowered in allowed else default


def _flag(value: object | None) -> bool:
    """Interpret a checkbox value in any of the shapes hosts store them.

    Hosts save a single checkbox either as a plain boolean, as a string, or as
    a mapping of ticked option names (``{"on": "1"}``). A list of ticked names
    is accepted as well.
    """
    match value:
        case None:
            return False
        case bool():
            return value
        case int() | float():
            return value != 0
        case str():
            return value.strip().lower() not in _FALSE_WORDS
        case cabc.Mapping():
            return _flag(value.get("on"))
        case cabc.Iterable():
            return "on" in {str(item).strip() for item in value}
        case _:
            return bool(value)


def _ticked(value: object | None) -> frozenset[str]:
    """Return the names ticked in a multi-checkbox value.

    A mapping counts a name as ticked when its key is present with a value
    other than ``None`` or ``False``. Strings are split on commas and
    whitespace.
    """
    match value:
        case None | bool():
            return frozenset()
        case str():
            parts = value.replace(",", " ").split()
            return frozenset(part for part in parts if part)
        case cabc.Mapping():
            return frozenset(
                str(key).strip()
                for key, item in value.items()
                if item is not None and item is not False
            )
        case cabc.Iterable():
            return frozenset(
                text for text in (str(item).strip() for item in value) if text
            )
        case _:
            return frozenset()


def _coerce_content_length(value: object | None) -> int:
    """Return a non-negative word count.

    Unset, zero and non-numeric values fall back to the default length.
    Negative numbers clamp to zero.
    """
    match value:
        case None | bool():
            return DEFAULT_CONTENT_LENGTH
        case int():
            number = value
        case float():
            if not math.isfinite(value):
                return DEFAULT_CONTENT_LENGTH
            number = int(value)
        case str():
            text = value.strip()
            try:
                number = int(text)
            except ValueError:
                try:
                    parsed = float(text)
                except ValueError:
                    return DEFAULT_CONTENT_LENGTH
                if not math.isfinite(parsed):
                    return DEFAULT_CONTENT_LENGTH
                number = int(parsed)
        case _:
            return DEFAULT_CONTENT_LENGTH
    if number == 0:
        return DEFAULT_CONTENT_LENGTH
    return max(number, 0)


def _as_mapping(value: object | None, *, context: str) -> dict[str, typ.Any]:
    """Return ``value`` as a dict, treating ``None`` as empty.

    Raises
    ------
    SiteConfigError
        If ``value`` is neither ``None`` nor a mapping.
    """
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"'{context}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(value)


__all__ = [
    "_as_mapping",
    "_choice",
    "_coerce_content_length",
    "_flag",
    "_optional_str",
    "_ticked",
]
