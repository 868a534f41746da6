"""Rate-table repositories: bundled reference data and CSV/Excel files."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Callable, Generic, Sequence, TypeVar

import pandas as pd

from tariff_checker.domain.models import (
    ElectricityProvider,
    FuelStation,
    GasProvider,
    LoanProduct,
    WaterProvider,
)
from tariff_checker.infrastructure import reference_data
from tariff_checker.infrastructure.parsing.rate_tables import (
    electricity_to_records,
    fuel_to_records,
    gas_to_records,
    loans_to_records,
    water_to_records,
)
from tariff_checker.infrastructure.parsing.utils import compute_file_hash, ensure_bytes, read_table

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StaticRateRepository(Generic[T]):
    """Serves an in-memory table, by default one of the bundled ones."""

    def __init__(self, records: Sequence[T]) -> None:
        self._records = tuple(records)

    def list_records(self) -> Sequence[T]:
        return self._records


class FileRateRepository(Generic[T]):
    """Parses a CSV or Excel table once and serves the resulting records."""

    def __init__(
        self,
        source: BytesIO | Path | bytes | str,
        parser: Callable[[pd.DataFrame], Sequence[T]],
        name: str | None = None,
        sheet_name: str | int = 0,
    ) -> None:
        if name is None and isinstance(source, (Path, str)):
            name = str(source)
        self._source = ensure_bytes(source)
        self._name = name
        self._parser = parser
        self._sheet_name = sheet_name
        self._records: tuple[T, ...] | None = None

    @property
    def file_hash(self) -> str:
        return compute_file_hash(self._source)

    def list_records(self) -> Sequence[T]:
        if self._records is None:
            df = read_table(self._source, name=self._name, sheet_name=self._sheet_name)
            self._records = tuple(self._parser(df))
            logger.info(
                "Loaded %d records from %s (sha256 %s)",
                len(self._records),
                self._name or "upload",
                self.file_hash[:12],
            )
        return self._records


def electricity_file_repository(source, name: str | None = None) -> FileRateRepository[ElectricityProvider]:
    return FileRateRepository(source, electricity_to_records, name=name)


def water_file_repository(source, name: str | None = None) -> FileRateRepository[WaterProvider]:
    return FileRateRepository(source, water_to_records, name=name)


def gas_file_repository(source, name: str | None = None) -> FileRateRepository[GasProvider]:
    return FileRateRepository(source, gas_to_records, name=name)


def fuel_file_repository(source, name: str | None = None) -> FileRateRepository[FuelStation]:
    return FileRateRepository(source, fuel_to_records, name=name)


def loan_file_repository(source, name: str | None = None) -> FileRateRepository[LoanProduct]:
    return FileRateRepository(source, loans_to_records, name=name)


def reference_repositories() -> dict[str, StaticRateRepository]:
    return {
        "electricity": StaticRateRepository(reference_data.ELECTRICITY_PROVIDERS),
        "water": StaticRateRepository(reference_data.WATER_PROVIDERS),
        "gas": StaticRateRepository(reference_data.GAS_PROVIDERS),
        "fuel": StaticRateRepository(reference_data.FUEL_STATIONS),
        "loans": StaticRateRepository(reference_data.LOAN_PRODUCTS),
        "mobile": StaticRateRepository(reference_data.MOBILE_PLANS),
        "internet": StaticRateRepository(reference_data.INTERNET_PLANS),
    }
