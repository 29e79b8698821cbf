"""
shared resources between services
"""

import functools
import math
import re
from typing import Callable, Optional, TypeVar

from pi_monitor.models.source_error import SourceUnavailable

T = TypeVar("T")

# plain decimal numbers as the kernel writes them
NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


def probe(func: Callable[..., T]) -> Callable[..., Optional[T]]:
    """
    Marks func as a probe boundary: a SourceUnavailable raised inside
    becomes None for the caller.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Optional[T]:
        try:
            return func(*args, **kwargs)
        except SourceUnavailable:
            return None

    return wrapper


def require_text(raw: Optional[str], source: str) -> str:
    """Returns raw with surrounding whitespace removed, or raises if there is nothing to parse."""
    if raw is None:
        raise SourceUnavailable(source, "not available")
    text = raw.strip()
    if not text:
        raise SourceUnavailable(source, "empty")
    return text


def to_finite(value: Optional[str], source: str) -> float:
    """Parses value as a float, rejecting missing, non-numeric, nan and inf values."""
    if value is None:
        raise SourceUnavailable(source, "missing field")
    if not NUMBER.fullmatch(value.strip()):
        raise SourceUnavailable(source, f"not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise SourceUnavailable(source, f"not finite: {value!r}")
    return number
