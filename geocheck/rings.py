"""Closed-loop predicate for LinearRing coordinates."""

import math
from collections.abc import Sequence
from typing import Any

from geocheck.checks import Check, array_of, is_array
from geocheck.errors import ErrorCode, Path, ValidationIssue, issue

MIN_RING_POSITIONS = 4


def _same_number(x: Any, y: Any) -> bool:
    # NaN never equals itself; a repeated NaN still closes the ring
    if isinstance(x, float) and isinstance(y, float) and math.isnan(x) and math.isnan(y):
        return True
    return x == y


def positions_equal(a: Any, b: Any) -> bool:
    """Structural equality of two positions: same length, each number equal."""
    if not (is_array(a) and is_array(b)) or len(a) != len(b):
        return False
    return all(_same_number(x, y) for x, y in zip(a, b))


def is_closed_loop(positions: Sequence[Any]) -> bool:
    """
    True if a sequence of positions forms a LinearRing.

    A ring needs at least 4 positions and its first position must equal
    its last. Self-intersection is not tested.
    """
    if len(positions) < MIN_RING_POSITIONS:
        return False
    return positions_equal(positions[0], positions[-1])


def closed_loop(value: Any, path: Path) -> list[ValidationIssue]:
    if not is_array(value):
        return [issue(ErrorCode.TYPE_MISMATCH, path, "LinearRing", value)]
    if is_closed_loop(value):
        return []
    if len(value) < MIN_RING_POSITIONS:
        detail = f"{len(value)} positions, need at least {MIN_RING_POSITIONS}"
    else:
        detail = f"first position {value[0]!r} != last position {value[-1]!r}"
    return [
        issue(
            ErrorCode.CLOSED_LOOP_VIOLATION,
            path,
            f"closed LinearRing of at least {MIN_RING_POSITIONS} positions",
            value,
            detail=detail,
        )
    ]


def linear_ring(position: Check) -> Check:
    """
    Array of positions that also satisfies the closed-loop predicate.

    Position issues and a closed-loop violation are both reported for the
    same ring.
    """
    positions = array_of(position, expected="array of positions")

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        errors = positions(value, path)
        if not is_array(value):
            return errors
        return errors + closed_loop(value, path)

    return check
