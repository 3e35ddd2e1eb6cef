"""Key-checked object combinator with foreign member pass-through."""

from collections.abc import Mapping
from typing import Any

from geocheck.checks import Check
from geocheck.errors import ErrorCode, Path, ValidationIssue, issue


def object_of(
    required: Mapping[str, Check],
    optional: Mapping[str, Check] | None = None,
    expected: str = "object",
) -> Check:
    """
    Build a check for a GeoJSON object.

    Args:
        required: Keys that must be present, with the check for each value
        optional: Keys that may be present, checked only when they are
        expected: Description used when the value is not an object

    Every other member is a foreign member and is accepted without
    inspection.
    """
    optional = optional or {}

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if not isinstance(value, Mapping):
            return [issue(ErrorCode.TYPE_MISMATCH, path, expected, value)]

        errors: list[ValidationIssue] = []
        for key, member_check in required.items():
            if key not in value:
                errors.append(
                    ValidationIssue(
                        code=ErrorCode.MISSING_REQUIRED_KEY,
                        path=path + (key,),
                        expected=f"required member '{key}'",
                        found="missing",
                        detail=f"{expected} is missing '{key}'",
                    )
                )
                continue
            errors.extend(member_check(value[key], path + (key,)))

        for key, member_check in optional.items():
            if key in value:
                errors.extend(member_check(value[key], path + (key,)))

        return errors

    return check
