from pathlib import Path

import pytest

from aton_import.common.errors import StageError
from aton_import.common.models import ImportContext
from aton_import.pipeline.batch import run_import
from aton_import.pipeline.racon import RaconImportProcessor
from aton_import.pipeline.source import read_rows
from aton_import.pipeline.store import JsonEntityStore

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _store(tmp_path: Path) -> JsonEntityStore:
    path = tmp_path / "atons.json"
    path.write_text((FIXTURES / "existing_store.json").read_text(encoding="utf-8"), encoding="utf-8")
    return JsonEntityStore(path)


@pytest.mark.integration
def test_run_import_counts_and_reconciles(tmp_path: Path):
    store = _store(tmp_path)
    processor = RaconImportProcessor(ImportContext(changeset=42, user="ops", user_id=5))

    stats = run_import(processor, read_rows(FIXTURES / "racon_rows.csv"), store)

    assert stats["rows_in"] == 5
    assert stats["created"] == 1
    assert stats["updated"] == 1
    assert stats["skipped"] == {"INACTIVE": 1, "MISSING_IDENTIFIER": 1}
    assert stats["failed"] == 1
    assert stats["failures"][0]["row_number"] == 5
    assert stats["failures"][0]["column"] == "LATITUDE"

    merged = store.get("AFM1")
    assert merged.tag("seamark:type") == "light_major"
    assert merged.tag("seamark:light:character") == "Fl"
    assert merged.tag("seamark:radar_transponder:orientation") is None
    assert merged.tag("seamark:radar_transponder:sector_start") == "20"
    assert merged.tag("seamark:radar_transponder:sector_end") == "280"
    assert merged.tag("seamark:radar_transponder:period") == "60"
    assert merged.version == 4
    assert merged.changeset == 42

    created = store.get("AFM2")
    assert created.lat == 56.25
    assert created.tag("seamark:type") == "radar_transponder"
    assert created.tag("seamark:radar_transponder:orientation") == "360"
    assert created.tag("seamark:radar_transponder:period") == "30"
    assert created.timestamp.year == 2015


@pytest.mark.integration
def test_rerunning_the_same_rows_is_stable(tmp_path: Path):
    store = _store(tmp_path)
    processor = RaconImportProcessor(ImportContext(changeset=42))

    run_import(processor, read_rows(FIXTURES / "racon_rows.csv"), store)
    first = {key: store.get(key).to_dict() for key in ("AFM1", "AFM2")}
    stats = run_import(processor, read_rows(FIXTURES / "racon_rows.csv"), store)
    second = {key: store.get(key).to_dict() for key in ("AFM1", "AFM2")}

    assert first == second
    assert stats["created"] == 0
    assert stats["updated"] == 2


@pytest.mark.integration
def test_strict_mode_stops_on_malformed_row(tmp_path: Path):
    store = _store(tmp_path)
    processor = RaconImportProcessor(ImportContext(changeset=42))

    with pytest.raises(StageError):
        run_import(processor, read_rows(FIXTURES / "racon_rows.csv"), store, strict=True)


@pytest.mark.integration
def test_oversized_number_fails_only_its_row(tmp_path: Path):
    store = JsonEntityStore(tmp_path / "atons.json")
    processor = RaconImportProcessor(ImportContext(changeset=42))
    row = {
        "STATUS": "DRIFT",
        "AFM_NR": "AFM1",
        "NR_DK": 10**400,
        "NR_INT": 99,
        "LATITUDE": 55.1,
        "LONGITUDE": 12.3,
    }

    stats = run_import(processor, [(1, row)], store)

    assert stats["failed"] == 1
    assert stats["failures"][0]["column"] == "NR_DK"
    assert len(store) == 0
