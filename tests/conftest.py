"""
Pytest configuration and fixtures for geocheck tests.

This module provides sample GeoJSON values shared across test modules.
"""

import pytest

from geocheck.config import Settings


# ============================================================================
# Sample Geometry Fixtures
# ============================================================================

@pytest.fixture
def sample_point():
    """Sample Point geometry."""
    return {
        "type": "Point",
        "coordinates": [139.7, 35.7]
    }


@pytest.fixture
def sample_multipoint():
    """Sample MultiPoint geometry."""
    return {
        "type": "MultiPoint",
        "coordinates": [[139.7, 35.7], [139.8, 35.8]]
    }


@pytest.fixture
def sample_linestring():
    """Sample LineString geometry."""
    return {
        "type": "LineString",
        "coordinates": [
            [139.7, 35.7],
            [139.8, 35.8],
            [139.9, 35.9]
        ]
    }


@pytest.fixture
def sample_multilinestring():
    """Sample MultiLineString geometry."""
    return {
        "type": "MultiLineString",
        "coordinates": [
            [[139.7, 35.7], [139.8, 35.8]],
            [[140.0, 36.0], [140.1, 36.1], [140.2, 36.2]]
        ]
    }


@pytest.fixture
def sample_polygon():
    """Sample Polygon geometry (closed ring)."""
    return {
        "type": "Polygon",
        "coordinates": [[
            [139.7, 35.7],
            [139.8, 35.7],
            [139.8, 35.8],
            [139.7, 35.8],
            [139.7, 35.7]
        ]]
    }


@pytest.fixture
def sample_polygon_with_hole():
    """Sample Polygon geometry with an interior ring."""
    return {
        "type": "Polygon",
        "coordinates": [
            [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
            [[2, 2], [4, 2], [4, 4], [2, 2]]
        ]
    }


@pytest.fixture
def sample_multipolygon():
    """Sample MultiPolygon geometry."""
    return {
        "type": "MultiPolygon",
        "coordinates": [
            [[[0, 0], [1, 0], [1, 1], [0, 0]]],
            [[[5, 5], [6, 5], [6, 6], [5, 6], [5, 5]]]
        ]
    }


@pytest.fixture
def sample_geometries(
    sample_point,
    sample_multipoint,
    sample_linestring,
    sample_multilinestring,
    sample_polygon,
    sample_multipolygon,
):
    """One valid geometry of each of the six geometry types."""
    return [
        sample_point,
        sample_multipoint,
        sample_linestring,
        sample_multilinestring,
        sample_polygon,
        sample_multipolygon,
    ]


# ============================================================================
# Sample Composite Fixtures
# ============================================================================

@pytest.fixture
def sample_geometry_collection(sample_point, sample_linestring):
    """Sample GeometryCollection."""
    return {
        "type": "GeometryCollection",
        "geometries": [sample_point, sample_linestring]
    }


@pytest.fixture
def sample_feature(sample_point):
    """Sample Feature with a Point geometry."""
    return {
        "type": "Feature",
        "id": "tokyo-station",
        "geometry": sample_point,
        "properties": {"name": "Tokyo Station", "category": "station"}
    }


@pytest.fixture
def sample_feature_collection(sample_feature, sample_polygon):
    """Sample FeatureCollection with two features."""
    return {
        "type": "FeatureCollection",
        "features": [
            sample_feature,
            {
                "type": "Feature",
                "id": 2,
                "geometry": sample_polygon,
                "properties": {"name": "Block"}
            }
        ]
    }


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def strict_settings():
    """Settings with RFC-strict positions and bbox."""
    return Settings(_env_file=None, strict_positions=True)
