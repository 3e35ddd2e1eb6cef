"""
GeoJSON geometry schema set.

Builds the checks for the six geometry types from shared Position,
LineString and LinearRing building blocks, plus the tag-driven Geometry
union that dispatches across them.

GeometryCollection is deliberately not a member of the Geometry union;
see geocheck.composite.
"""

from typing import Any

from geocheck.checks import (
    Check,
    all_of,
    array_of,
    literal,
    number,
    number_array,
    tagged,
    tuple_at_least,
)
from geocheck.errors import ErrorCode, Path, ValidationIssue, issue
from geocheck.objects import object_of
from geocheck.rings import linear_ring

GEOMETRY_TYPES = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
)


# ============================================================
# Position and bbox
# ============================================================

def _even_bbox(value: Any, path: Path) -> list[ValidationIssue]:
    if len(value) >= 4 and len(value) % 2 == 0:
        return []
    return [
        issue(
            ErrorCode.SHAPE_MISMATCH,
            path,
            "bbox of 2*n numbers (n >= 2)",
            value,
            detail=f"got {len(value)} values",
        )
    ]


def position_check(strict: bool = False) -> Check:
    """
    Position check.

    The lenient form accepts any array of numbers, including one with
    fewer than two elements. The strict form requires
    [longitude, latitude, ...].
    """
    if strict:
        return tuple_at_least(number, number, rest=number, expected="position")
    return number_array


def bbox_check(strict: bool = False) -> Check:
    """bbox check; strict form also requires an even length of at least 4."""
    if strict:
        return all_of(number_array, _even_bbox)
    return number_array


def type_tag(name: str) -> Check:
    """Literal check for a `type` member."""
    return literal(name, code=ErrorCode.UNRECOGNIZED_TYPE_TAG)


# ============================================================
# Geometry schemas
# ============================================================

class GeometrySchemas:
    """The six geometry checks and the Geometry union.

    Attributes:
        position: Position check
        bbox: bbox check
        line_string: LineString coordinates (at least two positions)
        linear_ring: LinearRing coordinates (closed, at least four positions)
        dispatch: Mapping from geometry type tag to its check
        geometry: Tag-driven union over the six geometry types
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.position = position_check(strict)
        self.bbox = bbox_check(strict)
        self.line_string = tuple_at_least(
            self.position,
            self.position,
            rest=self.position,
            expected="array of positions",
        )
        self.linear_ring = linear_ring(self.position)

        coordinates = {
            "Point": self.position,
            "MultiPoint": array_of(self.position, expected="array of positions"),
            "LineString": self.line_string,
            "MultiLineString": array_of(
                self.line_string, expected="array of LineString coordinates"
            ),
            "Polygon": array_of(self.linear_ring, expected="array of linear rings"),
            "MultiPolygon": array_of(
                array_of(self.linear_ring, expected="array of linear rings"),
                expected="array of Polygon coordinates",
            ),
        }

        self.dispatch: dict[str, Check] = {
            name: object_of(
                required={"type": type_tag(name), "coordinates": coordinates[name]},
                optional={"bbox": self.bbox},
                expected=f"{name} object",
            )
            for name in GEOMETRY_TYPES
        }
        self.geometry = tagged(self.dispatch, expected="Geometry object")

    def __getitem__(self, name: str) -> Check:
        return self.dispatch[name]
