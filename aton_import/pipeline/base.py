"""Shared shape of legacy AtoN row processors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from aton_import.common.constants import ACTIVE_STATUS, TAG_TYPE
from aton_import.common.logging import default_logger, log_event
from aton_import.common.models import AtonEntity, ImportContext, SkipSignal
from aton_import.parsers.fields import (
    DEFAULT_DATE_FORMATS,
    RawRow,
    date_value_or_null,
    numeric_value,
)
from aton_import.pipeline.coordinates import WGS84_EPSG, resolve_position, within_bbox
from aton_import.pipeline.reconcile import reconcile


class AtonImportProcessor(ABC):
    """Turns one legacy row into an AtonEntity and merges it with a stored one.

    Subclasses implement ``gate`` and ``build_entity`` for their source
    format and declare the tag namespace they own.
    """

    source_label = "aton"
    owned_namespace: str = ""
    guarded_tags: tuple[str, ...] = (TAG_TYPE,)

    lat_column = "LATITUDE"
    lon_column = "LONGITUDE"
    timestamp_column = "Ajourfoert_dato"

    def __init__(
        self,
        context: ImportContext,
        *,
        active_status: str = ACTIVE_STATUS,
        date_formats: Iterable[str] = DEFAULT_DATE_FORMATS,
        source_epsg: int = WGS84_EPSG,
        bbox: dict | None = None,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ) -> None:
        self.context = context
        self.active_status = active_status
        self.date_formats = tuple(date_formats)
        self.source_epsg = source_epsg
        self.bbox = bbox
        self.logger = logger or default_logger()
        self.run_id = run_id

    @classmethod
    def from_config(
        cls,
        cfg: dict,
        context: ImportContext,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ) -> "AtonImportProcessor":
        return cls(
            context,
            active_status=cfg["source"]["active_status"],
            date_formats=cfg["source"]["date_formats"],
            source_epsg=cfg["crs"]["source_epsg"],
            bbox=cfg["validation"]["bbox_wgs84"],
            logger=logger,
            run_id=run_id,
        )

    @abstractmethod
    def gate(self, row: RawRow) -> SkipSignal | None:
        """Return a SkipSignal for ineligible rows, None otherwise."""

    @abstractmethod
    def build_entity(self, row: RawRow) -> AtonEntity:
        """Build a candidate entity from a gate-accepted row."""

    def parse_row(self, row: RawRow, row_number: int | None = None) -> AtonEntity | SkipSignal:
        skip = self.gate(row)
        if skip is not None:
            log_event(
                self.logger,
                skip.message,
                run_id=self.run_id,
                stage="parse",
                source=self.source_label,
                event="ROW_SKIP",
                status="skipped",
                row_number=row_number,
            )
            return skip

        entity = self.build_entity(row)
        if self.bbox is not None and not within_bbox(entity.lat, entity.lon, self.bbox):
            log_event(
                self.logger,
                f"Position {entity.lat}, {entity.lon} is outside the expected area",
                level=logging.WARNING,
                run_id=self.run_id,
                stage="parse",
                source=self.source_label,
                event="COORDINATE_OUTLIER",
                status="warning",
                row_number=row_number,
                identifier=entity.identifier,
            )
        return entity

    def merge(self, existing: AtonEntity | None, candidate: AtonEntity) -> AtonEntity:
        return reconcile(
            existing,
            candidate,
            owned_namespace=self.owned_namespace,
            guarded_tags=self.guarded_tags,
        )

    def is_active(self, status: str | None) -> bool:
        return status is not None and status.casefold() == self.active_status.casefold()

    def new_entity(self, identifier: str, row: RawRow) -> AtonEntity:
        """Entity with position, timestamp and attribution filled in but no tags."""
        lat, lon = resolve_position(
            numeric_value(row, self.lat_column),
            numeric_value(row, self.lon_column),
            source_epsg=self.source_epsg,
            lat_column=self.lat_column,
            lon_column=self.lon_column,
        )
        return AtonEntity(
            identifier=identifier,
            lat=lat,
            lon=lon,
            timestamp=date_value_or_null(row, self.timestamp_column, self.date_formats),
            user=self.context.user_name,
            uid=self.context.uid,
            changeset=self.context.changeset,
            visible=True,
        )
