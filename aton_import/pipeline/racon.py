"""RACON (radar transponder) rows from the legacy Danish AFM register.

Produces nodes tagged per the OSM seamark scheme, see
https://wiki.openstreetmap.org/wiki/Key:seamark and
https://wiki.openstreetmap.org/wiki/Key:radar_transponder.
The base AtoN import is expected to have run first; this processor then
owns only the ``seamark:radar_transponder`` namespace.
"""

from __future__ import annotations

from aton_import.common.constants import (
    RACON_CATEGORY,
    RACON_NAMESPACE,
    RACON_TYPE,
    TAG_ATON_UID,
    TAG_INT_RACON_NUMBER,
    TAG_NAME,
    TAG_RACON_CATEGORY,
    TAG_RACON_GROUP,
    TAG_RACON_NUMBER,
    TAG_RACON_ORIENTATION,
    TAG_RACON_PERIOD,
    TAG_RACON_SECTOR_END,
    TAG_RACON_SECTOR_START,
    TAG_RACON_WAVELENGTH,
    TAG_TYPE,
)
from aton_import.common.models import AtonEntity, SkipSignal
from aton_import.parsers.fields import RawRow, int_value, string_value
from aton_import.parsers.period import parse_period
from aton_import.parsers.sector import parse_sectors
from aton_import.pipeline.base import AtonImportProcessor

STATUS_COLUMN = "STATUS"
UID_COLUMN = "AFM_NR"
NUMBER_COLUMN = "NR_DK"
INT_NUMBER_COLUMN = "NR_INT"
NAME_COLUMN = "AFM_navn"
WAVELENGTH_COLUMN = "Radarbaand"
GROUP_COLUMN = "Identifikation"
PERIOD_COLUMN = "Tidsinterval"
SECTOR_COLUMN = "Retning_mod_fyret"


class RaconImportProcessor(AtonImportProcessor):
    source_label = "racon"
    owned_namespace = RACON_NAMESPACE

    def gate(self, row: RawRow) -> SkipSignal | None:
        racon_nr = string_value(row, NUMBER_COLUMN)
        if not self.is_active(string_value(row, STATUS_COLUMN)):
            return SkipSignal("INACTIVE", f"Skipping inactive RACON {racon_nr}")
        if string_value(row, UID_COLUMN) is None:
            return SkipSignal("MISSING_IDENTIFIER", f"Skipping RACON without AFM-NR {racon_nr}")
        return None

    def build_entity(self, row: RawRow) -> AtonEntity:
        aton_uid = string_value(row, UID_COLUMN)
        racon_nr = str(int_value(row, NUMBER_COLUMN))
        int_racon_nr = str(int_value(row, INT_NUMBER_COLUMN))

        aton = self.new_entity(aton_uid, row)
        aton.update_tag(TAG_ATON_UID, aton_uid)
        aton.update_tag(TAG_RACON_NUMBER, racon_nr)
        aton.update_tag(TAG_INT_RACON_NUMBER, int_racon_nr)
        aton.update_tag(TAG_NAME, string_value(row, NAME_COLUMN))

        aton.update_tag(TAG_TYPE, RACON_TYPE)
        aton.update_tag(TAG_RACON_CATEGORY, RACON_CATEGORY)
        aton.update_tag(TAG_RACON_WAVELENGTH, string_value(row, WAVELENGTH_COLUMN))
        aton.update_tag(TAG_RACON_GROUP, string_value(row, GROUP_COLUMN))
        aton.update_tag(TAG_RACON_PERIOD, parse_period(string_value(row, PERIOD_COLUMN)))

        sectors = parse_sectors(string_value(row, SECTOR_COLUMN))
        if len(sectors) == 2:
            aton.update_tag(TAG_RACON_SECTOR_START, sectors[0])
            aton.update_tag(TAG_RACON_SECTOR_END, sectors[1])
        elif len(sectors) == 1:
            aton.update_tag(TAG_RACON_ORIENTATION, sectors[0])

        return aton
