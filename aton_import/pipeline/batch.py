"""Row-by-row import: gate, build, look up, reconcile, upsert."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from aton_import.common.errors import MalformedFieldError, StageError
from aton_import.common.logging import default_logger, log_event
from aton_import.common.models import SkipSignal
from aton_import.pipeline.base import AtonImportProcessor
from aton_import.pipeline.store import JsonEntityStore

MAX_FAILURE_SAMPLES = 50


def run_import(
    processor: AtonImportProcessor,
    rows: Iterable[tuple[int, dict]],
    store: JsonEntityStore,
    *,
    strict: bool = False,
    logger: logging.Logger | None = None,
    run_id: str | None = None,
) -> dict:
    """Import ``rows`` into ``store`` and return run counts.

    A row that fails with MalformedFieldError is counted and skipped; in
    strict mode it aborts the run with StageError instead. The store is not
    saved here.
    """
    logger = logger or default_logger()
    source = processor.source_label

    rows_in = 0
    created = 0
    updated = 0
    skipped: dict[str, int] = defaultdict(int)
    failures: list[dict] = []
    failed = 0

    for row_number, row in rows:
        rows_in += 1
        try:
            outcome = processor.parse_row(row, row_number=row_number)
        except MalformedFieldError as exc:
            failed += 1
            if len(failures) < MAX_FAILURE_SAMPLES:
                failures.append({"row_number": row_number, "column": exc.column, "error": str(exc)})
            log_event(
                logger,
                f"row {row_number} rejected: {exc}",
                level=logging.ERROR,
                run_id=run_id,
                stage="import",
                source=source,
                event="ROW_FAIL",
                status="error",
                row_number=row_number,
                error_code=exc.error_code,
            )
            if strict:
                raise StageError(f"Malformed row {row_number} in {source} import") from exc
            continue

        if isinstance(outcome, SkipSignal):
            skipped[outcome.reason] += 1
            continue

        existing = store.get(outcome.identifier)
        store.upsert(processor.merge(existing, outcome))
        if existing is None:
            created += 1
        else:
            updated += 1

    stats = {
        "source": source,
        "rows_in": rows_in,
        "created": created,
        "updated": updated,
        "skipped": dict(sorted(skipped.items())),
        "failed": failed,
        "failures": failures,
    }
    log_event(
        logger,
        f"{source} import processed {rows_in} rows",
        run_id=run_id,
        stage="import",
        source=source,
        event="IMPORT_DONE",
        status="partial" if failed else "ok",
        rows_in=rows_in,
        rows_out=created + updated,
    )
    return stats
