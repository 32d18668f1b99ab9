"""Run report output."""

from __future__ import annotations

from pathlib import Path

from aton_import.common.fs import write_json


def write_run_summary(data_dir: Path, run_id: str, changeset: int, input_path: Path, stats: dict) -> Path:
    status = "partial" if stats.get("failed") else "success"
    summary_path = data_dir / "out" / "reports" / f"{run_id}_summary.json"
    payload = {
        "run_id": run_id,
        "changeset": changeset,
        "input": str(input_path),
        "status": status,
        "counts": {
            "rows_in": stats.get("rows_in", 0),
            "created": stats.get("created", 0),
            "updated": stats.get("updated", 0),
            "skipped": sum(stats.get("skipped", {}).values()),
            "failed": stats.get("failed", 0),
        },
        "skipped_by_reason": stats.get("skipped", {}),
        "failures": stats.get("failures", []),
    }
    write_json(summary_path, payload)
    return summary_path
