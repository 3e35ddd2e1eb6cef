"""
Primitive checks and union combinators.

A check is a callable ``check(value, path) -> list[ValidationIssue]``.
An empty list means the value is accepted. Checks never raise on
malformed input; every failure is returned as an issue carrying the path
from the root of the validated document.
"""

from collections.abc import Callable, Mapping
from typing import Any

from geocheck.errors import ErrorCode, Path, ValidationIssue, issue, json_kind

Check = Callable[[Any, Path], list[ValidationIssue]]


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# ============================================================
# Kind checks
# ============================================================

def number(value: Any, path: Path) -> list[ValidationIssue]:
    if is_number(value):
        return []
    return [issue(ErrorCode.TYPE_MISMATCH, path, "number", value)]


def string(value: Any, path: Path) -> list[ValidationIssue]:
    if isinstance(value, str):
        return []
    return [issue(ErrorCode.TYPE_MISMATCH, path, "string", value)]


def accept_any(value: Any, path: Path) -> list[ValidationIssue]:
    return []


def literal(expected: str, code: ErrorCode = ErrorCode.TYPE_MISMATCH) -> Check:
    """Accept exactly ``expected`` (same type and content)."""

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if type(value) is type(expected) and value == expected:
            return []
        return [
            issue(code, path, f'"{expected}"', value, detail=f"got value {value!r}")
        ]

    return check


def number_array(value: Any, path: Path) -> list[ValidationIssue]:
    """Accept an array whose elements are all numbers."""
    if not is_array(value):
        return [issue(ErrorCode.TYPE_MISMATCH, path, "array of numbers", value)]
    errors: list[ValidationIssue] = []
    for i, element in enumerate(value):
        errors.extend(number(element, path + (i,)))
    return errors


# ============================================================
# Array combinators
# ============================================================

def array_of(element_check: Check, expected: str = "array") -> Check:
    """Accept an array whose every element satisfies ``element_check``.

    All failing indices are reported, each with its own nested issues.
    """

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if not is_array(value):
            return [issue(ErrorCode.TYPE_MISMATCH, path, expected, value)]
        errors: list[ValidationIssue] = []
        for i, element in enumerate(value):
            errors.extend(element_check(element, path + (i,)))
        return errors

    return check


def tuple_at_least(*checks: Check, rest: Check, expected: str = "array") -> Check:
    """
    Accept an array with at least ``len(checks)`` elements.

    Named slots are checked positionally, every remaining element is
    checked with ``rest``.
    """
    minimum = len(checks)

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if not is_array(value):
            return [issue(ErrorCode.TYPE_MISMATCH, path, expected, value)]
        if len(value) < minimum:
            return [
                issue(
                    ErrorCode.SHAPE_MISMATCH,
                    path,
                    f"{expected} with at least {minimum} elements",
                    value,
                    detail=f"got {len(value)}",
                )
            ]
        errors: list[ValidationIssue] = []
        for i, element in enumerate(value):
            slot = checks[i] if i < minimum else rest
            errors.extend(slot(element, path + (i,)))
        return errors

    return check


def all_of(*checks: Check) -> Check:
    """Run checks in order, stopping at the first one that fails."""

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        for step in checks:
            errors = step(value, path)
            if errors:
                return errors
        return []

    return check


# ============================================================
# Unions
# ============================================================

def one_of(*checks: Check, expected: str) -> Check:
    """
    Naive alternative union.

    Succeeds on the first full match. When every variant fails, a single
    UNION_EXHAUSTED issue is reported carrying each variant's issues.
    Only used where the value has no tag to dispatch on.
    """

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        alternatives: list[tuple[ValidationIssue, ...]] = []
        for variant in checks:
            errors = variant(value, path)
            if not errors:
                return []
            alternatives.append(tuple(errors))
        return [
            ValidationIssue(
                code=ErrorCode.UNION_EXHAUSTED,
                path=path,
                expected=expected,
                found=json_kind(value),
                detail=f"value does not match any of {len(checks)} shapes",
                alternatives=tuple(alternatives),
            )
        ]

    return check


def nullable(inner: Check) -> Check:
    """Accept null, dispatch anything else to ``inner``."""

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if value is None:
            return []
        return inner(value, path)

    return check


def tagged(dispatch: Mapping[str, Check], expected: str, tag: str = "type") -> Check:
    """
    Tag-driven union.

    Reads ``value[tag]`` and runs only the matching variant. A missing,
    non-string or unknown tag fails immediately with UNRECOGNIZED_TYPE_TAG
    at the object's own path.
    """
    known = ", ".join(dispatch)

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if not isinstance(value, Mapping):
            return [issue(ErrorCode.TYPE_MISMATCH, path, expected, value)]
        if tag not in value:
            return [
                issue(
                    ErrorCode.UNRECOGNIZED_TYPE_TAG,
                    path,
                    f"{expected} with '{tag}' one of: {known}",
                    value,
                    detail=f"missing '{tag}' member",
                )
            ]
        name = value[tag]
        variant = dispatch.get(name) if isinstance(name, str) else None
        if variant is None:
            return [
                issue(
                    ErrorCode.UNRECOGNIZED_TYPE_TAG,
                    path,
                    f"{expected} with '{tag}' one of: {known}",
                    value,
                    detail=f"unknown '{tag}' {name!r}",
                )
            ]
        return variant(value, path)

    return check

