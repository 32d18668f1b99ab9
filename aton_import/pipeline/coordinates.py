"""Coordinate transformation and range checks."""

from __future__ import annotations

import math

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from aton_import.common.errors import MalformedFieldError

WGS84_EPSG = 4326


def _transform_to_wgs84(lat: float, lon: float, source_epsg: int) -> tuple[float, float] | None:
    if source_epsg == WGS84_EPSG:
        return lat, lon
    try:
        transformer = Transformer.from_crs(CRS.from_epsg(source_epsg), CRS.from_epsg(WGS84_EPSG), always_xy=True)
        transformed_lon, transformed_lat = transformer.transform(lon, lat)
    except (CRSError, ProjError):
        return None
    if not (math.isfinite(transformed_lat) and math.isfinite(transformed_lon)):
        return None
    return transformed_lat, transformed_lon


def resolve_position(
    lat: float,
    lon: float,
    *,
    source_epsg: int = WGS84_EPSG,
    lat_column: str = "LATITUDE",
    lon_column: str = "LONGITUDE",
) -> tuple[float, float]:
    """Return a WGS84 ``(lat, lon)`` pair or raise MalformedFieldError."""
    transformed = _transform_to_wgs84(lat, lon, source_epsg)
    if transformed is None:
        raise MalformedFieldError(lat_column, (lat, lon), reason=f"cannot be transformed from EPSG:{source_epsg}")
    lat, lon = transformed
    if not -90 <= lat <= 90:
        raise MalformedFieldError(lat_column, lat, reason="is out of range")
    if not -180 <= lon <= 180:
        raise MalformedFieldError(lon_column, lon, reason="is out of range")
    return lat, lon


def within_bbox(lat: float, lon: float, bbox: dict) -> bool:
    return (
        bbox["min_lat"] <= lat <= bbox["max_lat"]
        and bbox["min_lon"] <= lon <= bbox["max_lon"]
    )
