"""Data access helpers for loading the pincode reference table."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from openpyxl import load_workbook

from ..config import settings
from ..models.domain import PincodeRecord, Region, Zone
from ..services.validation import validate_format

REQUIRED_COLUMNS = frozenset({"pincode", "city", "state", "region", "zone", "tier"})

_TRUE_VALUES = {"true", "yes", "y", "1"}
_FALSE_VALUES = {"false", "no", "n", "0"}


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _coerce_float(value: Any) -> Optional[float]:
    text = _cell_text(value)
    if text == "":
        return None
    try:
        return float(text.replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_int(value: Any) -> Optional[int]:
    text = _cell_text(value)
    if text == "":
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Unable to parse integer from value '{value}'") from exc


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    text = _cell_text(value).lower()
    if text == "":
        return None
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Unable to parse boolean from value '{value}'")


def _split_couriers(value: Any, separator: str) -> tuple[str, ...]:
    text = _cell_text(value)
    return tuple(name.strip() for name in text.split(separator) if name.strip())


def _record_from_row(row: Mapping[str, Any], separator: str) -> tuple[str, PincodeRecord]:
    pincode = _cell_text(row.get("pincode"))
    validation = validate_format(pincode)
    if not validation.valid:
        raise ValueError(validation.error)

    tier = _coerce_int(row.get("tier"))
    record = PincodeRecord(
        city=_cell_text(row.get("city")),
        state=_cell_text(row.get("state")),
        region=Region(_cell_text(row.get("region"))),
        zone=Zone(_cell_text(row.get("zone"))),
        tier=tier if tier is not None else 3,
        is_metro=bool(_coerce_bool(row.get("is_metro"))),
        latitude=_coerce_float(row.get("latitude")),
        longitude=_coerce_float(row.get("longitude")),
        courier_services=_split_couriers(row.get("courier_services"), separator),
        delivery_days=_coerce_int(row.get("delivery_days")),
        cod_available=_coerce_bool(row.get("cod_available")),
    )
    return pincode, record


def _check_columns(path: Path, columns: Any) -> None:
    missing_columns = REQUIRED_COLUMNS - {_cell_text(name).lower() for name in columns if name is not None}
    if missing_columns:
        raise ValueError(f"Pincode file '{path}' missing columns: {', '.join(sorted(missing_columns))}")


def _iter_csv_rows(path: Path) -> Iterator[dict[str, Any]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Pincode file '{path}' is missing a header row.")
        _check_columns(path, reader.fieldnames)
        for row in reader:
            yield {(key or "").strip().lower(): value for key, value in row.items()}


def _iter_xlsx_rows(path: Path) -> Iterator[dict[str, Any]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Pincode workbook '{path}' is empty.")
        _check_columns(path, header)

        header_map = {_cell_text(name).lower(): idx for idx, name in enumerate(header) if name is not None}
        for row in rows:
            if not any(cell is not None for cell in row):
                continue
            yield {name: (row[idx] if idx < len(row) else None) for name, idx in header_map.items()}
    finally:
        wb.close()


def _iter_rows(path: Path) -> Iterator[dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return _iter_csv_rows(path)
    if suffix in (".xlsx", ".xlsm"):
        return _iter_xlsx_rows(path)
    raise ValueError(f"Unsupported pincode file type '{path.suffix}' for {path}")


@functools.lru_cache(maxsize=1)
def load_pincode_table(source: Optional[Path] = None) -> Mapping[str, PincodeRecord]:
    """Load the reference table from the configured CSV or XLSX file.

    Rows that cannot be parsed are skipped with a warning. When a pincode appears
    more than once the first row wins. The returned mapping is read-only.
    """

    path = Path(source) if source is not None else settings.pincode_file
    if not path.exists():
        raise FileNotFoundError(f"Pincode file not found: {path}")

    table: dict[str, PincodeRecord] = {}
    for line_no, row in enumerate(_iter_rows(path), start=2):
        try:
            pincode, record = _record_from_row(row, settings.courier_separator)
        except (KeyError, ValueError, TypeError) as e:
            logging.warning(f"Skipping invalid pincode row {line_no} in {path.name}: {e}")
            continue
        if pincode in table:
            logging.warning(f"Duplicate pincode {pincode} at row {line_no} in {path.name}, keeping first entry")
            continue
        table[pincode] = record

    logging.info(f"Loaded {len(table)} pincodes from {path}")
    return MappingProxyType(table)


def set_active_pincode_file(path: Path) -> None:
    """Update the active reference file and clear the cached table."""

    settings.pincode_file = Path(path).expanduser().resolve()
    load_pincode_table.cache_clear()
