"""
Error codes, issues and validation results for geocheck.

This module provides:
- ErrorCode constants for every kind of validation failure
- ValidationIssue, one path-qualified failure
- ValidationResult, the outcome of a validate() call
- GeoJSONValidationError for callers that prefer exceptions

Usage:
    from geocheck.errors import ErrorCode, ValidationResult

    result = validate(value)
    if not result.valid:
        for issue in result.errors:
            print(issue.location, issue.message)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Path = tuple[str | int, ...]


class ErrorCode(str, Enum):
    """Standardized codes for GeoJSON validation failures."""

    TYPE_MISMATCH = "TYPE_MISMATCH"
    MISSING_REQUIRED_KEY = "MISSING_REQUIRED_KEY"
    UNRECOGNIZED_TYPE_TAG = "UNRECOGNIZED_TYPE_TAG"
    SHAPE_MISMATCH = "SHAPE_MISMATCH"
    CLOSED_LOOP_VIOLATION = "CLOSED_LOOP_VIOLATION"
    UNION_EXHAUSTED = "UNION_EXHAUSTED"


def json_kind(value: Any) -> str:
    """Return the JSON kind name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def format_path(path: Path) -> str:
    """
    Render a path as a readable location.

    Examples:
        ()                                  -> "$"
        ("coordinates", 0)                  -> "coordinates[0]"
        ("features", 3, "geometry", "type") -> "features[3].geometry.type"
    """
    if not path:
        return "$"
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation failure at a specific path."""

    code: ErrorCode
    path: Path
    expected: str
    found: str
    detail: str | None = None
    alternatives: tuple[tuple["ValidationIssue", ...], ...] = ()

    @property
    def location(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        text = f"{self.location}: expected {self.expected}, got {self.found}"
        if self.detail:
            text += f" ({self.detail})"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        result: dict[str, Any] = {
            "code": self.code.value,
            "path": list(self.path),
            "location": self.location,
            "expected": self.expected,
            "found": self.found,
        }
        if self.detail:
            result["detail"] = self.detail
        if self.alternatives:
            result["alternatives"] = [
                [issue.to_dict() for issue in branch] for branch in self.alternatives
            ]
        return result


def issue(
    code: ErrorCode,
    path: Path,
    expected: str,
    value: Any,
    detail: str | None = None,
) -> ValidationIssue:
    """Build a ValidationIssue describing the kind of the offending value."""
    return ValidationIssue(
        code=code,
        path=path,
        expected=expected,
        found=json_kind(value),
        detail=detail,
    )


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool = True
    errors: list[ValidationIssue] = field(default_factory=list)
    truncated: bool = False

    @property
    def error(self) -> str | None:
        """Message of the first issue, or None when valid."""
        return self.errors[0].message if self.errors else None

    @property
    def codes(self) -> set[ErrorCode]:
        return {issue.code for issue in self.errors}

    def add_error(self, error: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.errors.append(error)
        self.valid = False

    def extend(self, errors: list[ValidationIssue]) -> None:
        for error in errors:
            self.add_error(error)

    def limit(self, max_errors: int | None) -> None:
        """
        Keep at most max_errors issues, flagging the result as truncated.

        Issues are kept in the order the checks produced them: schema
        member order within an object, index order within an array.
        """
        if max_errors is not None and len(self.errors) > max_errors:
            del self.errors[max_errors:]
            self.truncated = True

    def at(self, location: str) -> list[ValidationIssue]:
        """Return the issues reported at a rendered location."""
        return [issue for issue in self.errors if issue.location == location]

    def as_tree(self) -> dict[str | int, Any]:
        """
        Nest issues by path segment.

        Issues for a node are stored under the "_errors" key of that node,
        so a Polygon ring failure reads as
        {"coordinates": {0: {"_errors": [...]}}}.
        """
        tree: dict[str | int, Any] = {}
        for error in self.errors:
            node = tree
            for segment in error.path:
                node = node.setdefault(segment, {})
            node.setdefault("_errors", []).append(error.to_dict())
        return tree

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        result: dict[str, Any] = {"valid": self.valid}
        if self.errors:
            result["error"] = self.error
            result["errors"] = [error.to_dict() for error in self.errors]
        if self.truncated:
            result["truncated"] = True
        return result

    def raise_for_errors(self) -> None:
        """Raise GeoJSONValidationError if the result is invalid."""
        if not self.valid:
            raise GeoJSONValidationError(self)


class GeoJSONValidationError(Exception):
    """Raised by ValidationResult.raise_for_errors() when validation failed.

    Attributes:
        message: Human-readable error message (the first issue)
        code: ErrorCode of the first issue
        details: Serialized issues
        result: The originating ValidationResult
    """

    def __init__(self, result: ValidationResult):
        message = result.error or "GeoJSON validation failed"
        super().__init__(message)
        self.message = message
        self.result = result
        self.code = result.errors[0].code if result.errors else ErrorCode.TYPE_MISMATCH
        self.details = {"errors": [error.to_dict() for error in result.errors]}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a standardized error response dict."""
        return {
            "error": self.message,
            "code": self.code.value,
            "details": self.details,
        }
