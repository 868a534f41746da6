"""Shared parsing utilities for rate-table ingestion."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from io import BytesIO, StringIO
from pathlib import Path
import hashlib

import pandas as pd

from tariff_checker.errors import RateTableError

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
ABSENT_MARKERS = {"", "NAN", "NONE", "NULL", "-", "N/A"}


def ensure_bytes(source: BytesIO | Path | bytes | str) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        return Path(source).read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def compute_file_hash(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def looks_like_excel(data: bytes, name: str | None = None) -> bool:
    if name and Path(name).suffix.lower() in EXCEL_SUFFIXES:
        return True
    # xlsx is a zip container
    return data[:2] == b"PK"


def read_table(data: bytes, name: str | None = None, sheet_name: str | int = 0) -> pd.DataFrame:
    """Read a CSV or Excel rate table with every cell as a stripped string."""
    if looks_like_excel(data, name):
        df = pd.read_excel(
            BytesIO(data),
            sheet_name=sheet_name,
            engine="openpyxl",
            dtype=str,
            keep_default_na=False,
        )
    else:
        text = data.decode("utf-8-sig")
        sample = text[:2048]
        delimiter = ";" if sample.count(";") > sample.count(",") else ","
        df = pd.read_csv(StringIO(text), sep=delimiter, dtype=str, keep_default_na=False)
    df.columns = [str(column).strip() for column in df.columns]
    if df.empty:
        return df
    return df.apply(lambda col: col.astype(str).str.strip())


def require_columns(df: pd.DataFrame, required: set[str], table: str) -> None:
    missing = sorted(required - set(df.columns))
    if missing:
        raise RateTableError(f"{table} table is missing columns: {', '.join(missing)}")


def parse_optional_decimal(value: object, field: str = "value", row: int | None = None) -> Decimal | None:
    """Parse a price cell; blank and placeholder cells mean "not offered"."""
    if value is None:
        return None
    s = str(value).strip()
    if s.upper() in ABSENT_MARKERS:
        return None
    for ch in ["€", "$", " ", "\xa0"]:
        s = s.replace(ch, "")
    if "," in s and "." not in s:
        s = s.replace(",", ".")
    try:
        result = Decimal(s)
    except InvalidOperation:
        where = f" on row {row}" if row is not None else ""
        raise RateTableError(f"Cannot parse {field}={value!r}{where}") from None
    if not result.is_finite() or result < 0:
        where = f" on row {row}" if row is not None else ""
        raise RateTableError(f"{field} must be a non-negative number{where} (got {value!r})")
    return result


def parse_decimal(value: object, field: str = "value", row: int | None = None) -> Decimal:
    result = parse_optional_decimal(value, field, row)
    if result is None:
        where = f" on row {row}" if row is not None else ""
        raise RateTableError(f"Missing required {field}{where}")
    return result


def parse_int(value: object, field: str = "value", row: int | None = None) -> int:
    number = parse_decimal(value, field, row)
    if number != number.to_integral_value():
        raise RateTableError(f"{field} must be a whole number on row {row} (got {value!r})")
    return int(number)


def parse_bool(value: object) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "y", "да"}


def parse_list(value: object, separator: str = "|") -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(part.strip() for part in str(value).split(separator) if part.strip())


def optional_text(value: object) -> str | None:
    s = "" if value is None else str(value).strip()
    return s or None
