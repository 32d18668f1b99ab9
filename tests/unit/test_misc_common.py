import json
import logging
from datetime import datetime
from pathlib import Path

from aton_import.common.ids import generate_changeset_id, generate_run_id
from aton_import.common.logging import build_logger, close_logger, log_event
from aton_import.common.models import AtonEntity, ImportContext
from aton_import.common.time_utils import format_instant, parse_instant


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("run-")


def test_generate_changeset_id_is_positive_int():
    assert isinstance(generate_changeset_id(), int)
    assert generate_changeset_id() > 0


def test_instant_helpers_handle_none():
    assert format_instant(None) is None
    assert parse_instant(None) is None
    assert parse_instant(format_instant(datetime(2015, 3, 12))) == datetime(2015, 3, 12)


def test_import_context_defaults():
    context = ImportContext(changeset=3)
    assert context.user_name == ""
    assert context.uid == -1


def test_update_tag_with_none_removes_key():
    entity = AtonEntity(identifier="AFM1", lat=55.0, lon=12.0, tags={"seamark:name": "Old"})
    entity.update_tag("seamark:name", None)
    entity.update_tag("seamark:radar_transponder:group", None)
    assert entity.tags == {}


def test_entity_from_dict_drops_null_tags():
    entity = AtonEntity.from_dict(
        {"identifier": "AFM1", "lat": 55, "lon": 12, "tags": {"seamark:ref": "AFM1", "seamark:name": None}}
    )
    assert entity.tags == {"seamark:ref": "AFM1"}
    assert entity.timestamp is None
    assert entity.version == 1
    assert entity.to_dict()["lat"] == 55.0


def test_json_log_lines_have_stable_fields(tmp_path: Path):
    logger = build_logger("run-test", tmp_path)
    log_event(logger, "row skipped", event="ROW_SKIP", row_number=3)
    close_logger(logger)

    lines = (tmp_path / "run_meta" / "run-test.log.jsonl").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["event"] == "ROW_SKIP"
    assert payload["row_number"] == 3
    assert payload["identifier"] is None
    assert payload["message"] == "row skipped"


def test_rebuilding_logger_closes_previous_file_handler(tmp_path: Path):
    first = build_logger("run-reuse", tmp_path)
    old_file_handler = next(h for h in first.handlers if isinstance(h, logging.FileHandler))

    second = build_logger("run-reuse", tmp_path)

    assert old_file_handler not in second.handlers
    assert old_file_handler.stream is None
    close_logger(second)
    assert second.handlers == []
