import pytest
from pyproj import Transformer

from aton_import.common.errors import MalformedFieldError
from aton_import.pipeline.coordinates import resolve_position, within_bbox


def test_wgs84_is_passed_through():
    assert resolve_position(55.1, 12.3) == (55.1, 12.3)


def test_transform_from_utm_zone_32():
    transformer = Transformer.from_crs("EPSG:4326", "EPSG:25832", always_xy=True)
    easting, northing = transformer.transform(12.3, 55.1)

    lat, lon = resolve_position(northing, easting, source_epsg=25832)

    assert abs(lat - 55.1) < 1e-6
    assert abs(lon - 12.3) < 1e-6


def test_out_of_range_values_name_the_column():
    with pytest.raises(MalformedFieldError) as exc_info:
        resolve_position(55.1, 212.3, lon_column="LON")
    assert exc_info.value.column == "LON"


def test_within_bbox():
    bbox = {"min_lat": 53.5, "max_lat": 58.5, "min_lon": 7.0, "max_lon": 16.0}
    assert within_bbox(55.1, 12.3, bbox)
    assert not within_bbox(40.0, 12.3, bbox)
