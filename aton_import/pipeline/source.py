"""Legacy row readers for CSV, JSON and Excel exports."""

from __future__ import annotations

import csv
import json
import zipfile
from collections.abc import Mapping
from pathlib import Path
from typing import Iterator

from aton_import.common.errors import StageError
from aton_import.common.fs import read_json


def _read_csv_rows(path: Path) -> Iterator[tuple[int, dict]]:
    # utf-8-sig strips the BOM spreadsheet tools put in front of the header.
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            for row_number, row in enumerate(csv.DictReader(f), start=1):
                yield row_number, row
    except UnicodeDecodeError as exc:
        raise StageError(f"Input {path} is not valid UTF-8: {exc.reason}") from exc


def _read_json_rows(path: Path) -> Iterator[tuple[int, dict]]:
    try:
        payload = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StageError(f"Input {path} is not valid JSON: {exc}") from exc
    rows = payload.get("rows", []) if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise StageError(f"Expected a list of rows in {path}")
    for row_number, row in enumerate(rows, start=1):
        if not isinstance(row, Mapping):
            raise StageError(f"Row {row_number} in {path} is not an object")
        yield row_number, row


def _read_xlsx_rows(path: Path) -> Iterator[tuple[int, dict]]:
    import openpyxl
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = openpyxl.load_workbook(filename=str(path), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise StageError(f"Input {path} is not a readable workbook: {exc}") from exc
    try:
        rows = wb.worksheets[0].iter_rows(values_only=True)
        header_row = next(rows, None)
        if header_row is None:
            return
        header = [str(cell).strip() if cell is not None else None for cell in header_row]
        for row_number, values in enumerate(rows, start=1):
            if all(cell is None for cell in values):
                continue
            yield row_number, {name: cell for name, cell in zip(header, values) if name}
    finally:
        wb.close()


def read_rows(path: Path) -> Iterator[tuple[int, dict]]:
    """Yield ``(row_number, row)`` pairs, numbering data rows from 1."""
    if not path.exists():
        raise StageError(f"Missing input: {path}")
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return _read_csv_rows(path)
    if suffix == ".json":
        return _read_json_rows(path)
    if suffix == ".xlsx":
        return _read_xlsx_rows(path)
    raise StageError(f"Unsupported input format: {path.suffix or path.name}")
