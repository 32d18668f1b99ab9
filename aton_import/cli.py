"""CLI entrypoint for the legacy AtoN import."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from aton_import.common.config_loader import load_import_config
from aton_import.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS, STAGES
from aton_import.common.errors import PipelineError
from aton_import.common.ids import generate_changeset_id, generate_run_id
from aton_import.common.logging import build_logger, close_logger, log_event
from aton_import.common.models import ImportContext
from aton_import.pipeline.batch import run_import
from aton_import.pipeline.racon import RaconImportProcessor
from aton_import.pipeline.reports import write_run_summary
from aton_import.pipeline.source import read_rows
from aton_import.pipeline.store import JsonEntityStore

PROCESSORS = {
    "racon": RaconImportProcessor,
}


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=list(STAGES))
    parser.add_argument("--input", required=True)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--user", default=None)
    parser.add_argument("--user-id", type=int, default=None)
    parser.add_argument("--changeset", type=int, default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(run_id, data_dir=Path(args.data_dir), level=args.log_level)
    try:
        return _run_import(args, logger, run_id)
    finally:
        close_logger(logger)


def _run_import(args: argparse.Namespace, logger: logging.Logger, run_id: str) -> int:
    config_dir = Path(args.config_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    data_dir = Path(args.data_dir)
    input_path = Path(args.input)
    changeset = args.changeset if args.changeset is not None else generate_changeset_id()

    log_event(logger, "import start", run_id=run_id, stage=args.command, event="STAGE_START", status="ok")

    try:
        cfg = load_import_config(config_dir, args.command, overlay_config_dir=overlay_config_dir)
        context = ImportContext(changeset=changeset, user=args.user, user_id=args.user_id)
        processor = PROCESSORS[args.command].from_config(cfg, context, logger=logger, run_id=run_id)
        store = JsonEntityStore(data_dir / "store" / cfg["store"]["filename"])
        stats = run_import(
            processor,
            read_rows(input_path),
            store,
            strict=args.strict,
            logger=logger,
            run_id=run_id,
        )
    except PipelineError as exc:
        log_event(
            logger,
            f"import failed: {exc}",
            run_id=run_id,
            stage=args.command,
            event="STAGE_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    store.save()
    write_run_summary(data_dir, run_id=run_id, changeset=changeset, input_path=input_path, stats=stats)
    log_event(
        logger,
        "import end",
        run_id=run_id,
        stage=args.command,
        event="STAGE_END",
        status="partial" if stats["failed"] else "ok",
        rows_in=stats["rows_in"],
        rows_out=stats["created"] + stats["updated"],
    )
    if stats["failed"]:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
