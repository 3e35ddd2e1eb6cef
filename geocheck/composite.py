"""
Composite GeoJSON schema set.

GeometryCollection, Feature, FeatureCollection and the top-level GeoJSON
union, built on top of the geometry schema set.
"""

from functools import lru_cache

from geocheck.checks import (
    Check,
    accept_any,
    array_of,
    nullable,
    number,
    one_of,
    string,
    tagged,
)
from geocheck.geometry import GeometrySchemas, type_tag
from geocheck.objects import object_of


class GeoJSONSchemas(GeometrySchemas):
    """All GeoJSON checks.

    Adds to the geometry schema set:
        geometry_collection: GeometryCollection object
        feature: Feature object
        feature_collection: FeatureCollection object
        geojson: Tag-driven union over every GeoJSON type
    """

    def __init__(self, strict: bool = False):
        super().__init__(strict)

        # geometries may not hold another GeometryCollection
        self.geometry_collection = object_of(
            required={
                "type": type_tag("GeometryCollection"),
                "geometries": array_of(self.geometry, expected="array of geometries"),
            },
            optional={"bbox": self.bbox},
            expected="GeometryCollection object",
        )

        self.feature = object_of(
            required={
                "type": type_tag("Feature"),
                "geometry": nullable(self.geometry),
                "properties": accept_any,
            },
            optional={
                "id": one_of(string, number, expected="string or number"),
                "bbox": self.bbox,
            },
            expected="Feature object",
        )

        self.feature_collection = self.feature_collection_with(self.feature)

        self.geojson = tagged(
            {
                **self.dispatch,
                "GeometryCollection": self.geometry_collection,
                "Feature": self.feature,
                "FeatureCollection": self.feature_collection,
            },
            expected="GeoJSON object",
        )

    def feature_collection_with(self, feature: Check) -> Check:
        """FeatureCollection check whose `features` elements use ``feature``."""
        return object_of(
            required={
                "type": type_tag("FeatureCollection"),
                "features": array_of(feature, expected="array of features"),
            },
            optional={"bbox": self.bbox},
            expected="FeatureCollection object",
        )


@lru_cache(maxsize=None)
def get_schemas(strict: bool = False) -> GeoJSONSchemas:
    """Get the cached schema set for the given strictness."""
    return GeoJSONSchemas(strict)
