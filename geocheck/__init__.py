"""
geocheck

Structural validation of decoded GeoJSON (RFC 7946) values with
path-qualified error reports.
"""

__version__ = "0.1.0"

from geocheck.config import Settings, get_settings
from geocheck.engine import (
    is_valid,
    validate,
    validate_feature,
    validate_feature_collection,
    validate_features_batch,
    validate_geometry,
    validate_geometry_collection,
)
from geocheck.errors import (
    ErrorCode,
    GeoJSONValidationError,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "ErrorCode",
    "GeoJSONValidationError",
    "Settings",
    "ValidationIssue",
    "ValidationResult",
    "get_settings",
    "is_valid",
    "validate",
    "validate_feature",
    "validate_feature_collection",
    "validate_features_batch",
    "validate_geometry",
    "validate_geometry_collection",
]
