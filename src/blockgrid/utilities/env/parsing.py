"""Typed readers for ``BLOCKGRID_*`` environment variables.

Each reader returns its default when the variable is unset and raises
``ValueError`` naming the variable when the value is unusable.
"""

import math
import os
from typing import Callable, TypeVar

FLAG_ON = frozenset({"1", "true", "yes", "on"})

T = TypeVar("T")


def _read(env_var: str, convert: Callable[[str], T], kind: str) -> T | None:
    raw = os.environ.get(env_var)
    if raw is None:
        return None
    try:
        return convert(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}, got {raw!r}") from exc


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    return raw.strip().lower() in FLAG_ON


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Read a count such as LEDs per edge or grid columns."""

    parsed = _read(env_var, int, "an integer")
    if parsed is None:
        return default
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}, got {parsed}")
    return parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    greater_than: float | None = None,
    at_most: float | None = None,
) -> float:
    """Read a finite length such as the edge distance or block size.

    ``greater_than`` is an exclusive lower bound and ``at_most`` an inclusive
    upper bound.
    """

    parsed = _read(env_var, float, "a number")
    if parsed is None:
        return default
    if not math.isfinite(parsed):
        raise ValueError(f"{env_var} must be finite, got {parsed}")
    if greater_than is not None and parsed <= greater_than:
        raise ValueError(f"{env_var} must be greater than {greater_than}, got {parsed}")
    if at_most is not None and parsed > at_most:
        raise ValueError(f"{env_var} must be at most {at_most}, got {parsed}")
    return parsed
