"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from aton_import.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_import_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"source", "crs", "validation", "store"}
    _assert_required_keys(cfg, top_required, "import config")
    _assert_no_unknown_keys(cfg, top_required, "import config", allow_unknown)

    _assert_required_keys(cfg["source"], {"name", "active_status", "date_formats"}, "source")
    if not isinstance(cfg["source"]["active_status"], str) or not cfg["source"]["active_status"].strip():
        raise ConfigError("source.active_status must be a non-empty string")
    if not isinstance(cfg["source"]["date_formats"], list):
        raise ConfigError("source.date_formats must be a list")

    _assert_required_keys(cfg["crs"], {"source_epsg"}, "crs")
    if not isinstance(cfg["crs"]["source_epsg"], int):
        raise ConfigError("crs.source_epsg must be an integer EPSG code")

    _assert_required_keys(cfg["validation"], {"bbox_wgs84"}, "validation")
    _assert_required_keys(
        cfg["validation"]["bbox_wgs84"],
        {"min_lat", "max_lat", "min_lon", "max_lon"},
        "validation.bbox_wgs84",
    )
    _assert_required_keys(cfg["store"], {"filename"}, "store")

    return cfg
