"""
Validation engine for decoded GeoJSON values.

Entry points:
- validate: any GeoJSON object, dispatched by its `type` member
- validate_geometry, validate_geometry_collection, validate_feature,
  validate_feature_collection: narrower entry points for callers that
  already know the expected shape
- validate_features_batch: split a list of features into valid and invalid

Every entry point returns a ValidationResult and never raises for
malformed input.

Usage:
    import json
    from geocheck import validate

    result = validate(json.loads(text))
    if not result.valid:
        print(result.to_dict())
"""

import os
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from geocheck.checks import Check, is_array
from geocheck.composite import GeoJSONSchemas, get_schemas
from geocheck.config import Settings, get_settings
from geocheck.errors import Path, ValidationIssue, ValidationResult
from geocheck.logger import ValidationCallLogger, get_logger

logger = get_logger(__name__)

ROOT: Path = ()


def _worker_count(settings: Settings) -> int:
    if settings.max_workers is not None:
        return settings.max_workers
    return min(8, os.cpu_count() or 1)


def _run(entry_point: str, check: Check, value: Any, settings: Settings) -> ValidationResult:
    with ValidationCallLogger(logger, entry_point) as log:
        result = ValidationResult()
        result.extend(check(value, ROOT))
        result.limit(settings.max_errors)
        log.set_result(result)
    return result


# ============================================================
# FeatureCollection fan-out
# ============================================================

def _feature_collection_check(schemas: GeoJSONSchemas, settings: Settings) -> Check:
    """
    FeatureCollection check that validates large `features` arrays on
    worker threads.

    Per-feature issues are computed first and then replayed through the
    regular FeatureCollection check, so the issues and their order are the
    same as for a sequential run.
    """

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        features = value.get("features") if isinstance(value, Mapping) else None
        workers = _worker_count(settings)
        if (
            not is_array(features)
            or len(features) < settings.parallel_threshold
            or workers <= 1
        ):
            return schemas.feature_collection(value, path)

        logger.debug(
            "Validating features on worker threads",
            extra={"features": len(features), "workers": workers},
        )
        feature_path = path + ("features",)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            precomputed = list(
                executor.map(
                    lambda i: schemas.feature(features[i], feature_path + (i,)),
                    range(len(features)),
                )
            )

        def replay(element: Any, element_path: Path) -> list[ValidationIssue]:
            return precomputed[element_path[-1]]

        return schemas.feature_collection_with(replay)(value, path)

    return check


def _top_level_check(schemas: GeoJSONSchemas, settings: Settings) -> Check:
    feature_collection = _feature_collection_check(schemas, settings)

    def check(value: Any, path: Path) -> list[ValidationIssue]:
        if isinstance(value, Mapping) and value.get("type") == "FeatureCollection":
            return feature_collection(value, path)
        return schemas.geojson(value, path)

    return check


# ============================================================
# Entry points
# ============================================================

def validate(value: Any, settings: Settings | None = None) -> ValidationResult:
    """
    Validate any GeoJSON object.

    Args:
        value: Decoded JSON value
        settings: Settings to use instead of the cached environment settings

    Returns:
        ValidationResult; invalid results carry path-qualified issues
    """
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)
    return _run("validate", _top_level_check(schemas, settings), value, settings)


def validate_geometry(value: Any, settings: Settings | None = None) -> ValidationResult:
    """Validate one of the six geometry types (not a GeometryCollection)."""
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)
    return _run("validate_geometry", schemas.geometry, value, settings)


def validate_geometry_collection(
    value: Any, settings: Settings | None = None
) -> ValidationResult:
    """Validate a GeometryCollection."""
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)
    return _run("validate_geometry_collection", schemas.geometry_collection, value, settings)


def validate_feature(value: Any, settings: Settings | None = None) -> ValidationResult:
    """Validate a Feature."""
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)
    return _run("validate_feature", schemas.feature, value, settings)


def validate_feature_collection(
    value: Any, settings: Settings | None = None
) -> ValidationResult:
    """Validate a FeatureCollection, fanning out large ones to worker threads."""
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)
    check = _feature_collection_check(schemas, settings)
    return _run("validate_feature_collection", check, value, settings)


def is_valid(value: Any, settings: Settings | None = None) -> bool:
    """Quick check if a value is valid GeoJSON."""
    return validate(value, settings).valid


def validate_features_batch(
    features: Sequence[Any],
    settings: Settings | None = None,
    max_invalid: int = 100,
) -> tuple[list[Any], list[dict[str, Any]]]:
    """
    Validate a batch of GeoJSON features.

    Args:
        features: List of GeoJSON feature objects
        settings: Settings to use instead of the cached environment settings
        max_invalid: Stop after this many invalid features

    Returns:
        Tuple (valid_features, invalid_features_with_errors)
    """
    settings = settings or get_settings()
    schemas = get_schemas(settings.strict_positions)

    valid_features: list[Any] = []
    invalid_features: list[dict[str, Any]] = []

    for i, feature in enumerate(features):
        result = ValidationResult()
        result.extend(schemas.feature(feature, ROOT))
        result.limit(settings.max_errors)

        if result.valid:
            valid_features.append(feature)
            continue

        invalid_features.append({
            "index": i,
            "feature": feature,
            "errors": [error.to_dict() for error in result.errors],
        })
        if len(invalid_features) >= max_invalid:
            logger.info(
                "Stopped batch validation",
                extra={"checked": i + 1, "total": len(features), "invalid": len(invalid_features)},
            )
            break

    return valid_features, invalid_features
