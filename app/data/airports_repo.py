from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from app.core.errors import DatasetLoadError

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).resolve().parent / "airports.csv"


@dataclass(frozen=True)
class AirportRecord:
    icao: str
    name: str
    # search keys, derived once and never serialized
    icao_lower: str = field(init=False, repr=False, compare=False)
    name_lower: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "icao_lower", self.icao.lower())
        object.__setattr__(self, "name_lower", self.name.lower())


class AirportsRepo:
    def __init__(
        self,
        csv_path: Optional[Path] = None,
        id_column: str = "ident",
        name_column: str = "name",
    ):
        self.csv_path = Path(csv_path) if csv_path else DATA_PATH
        self.id_column = id_column
        self.name_column = name_column
        self._all: Tuple[AirportRecord, ...] = ()
        self._loaded = False

    @classmethod
    def from_records(cls, records: Iterable[AirportRecord]) -> "AirportsRepo":
        repo = cls()
        repo._all = tuple(records)
        repo._loaded = True
        return repo

    def load(self) -> None:
        if self._loaded:
            return

        try:
            with self.csv_path.open("r", encoding="utf-8-sig", newline="") as f:
                records = tuple(self._read(csv.DictReader(f)))
        except FileNotFoundError as e:
            raise DatasetLoadError(f"Airport dataset not found at {self.csv_path}") from e
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetLoadError(f"Could not read airport dataset {self.csv_path}: {e}") from e

        self._all = records
        self._loaded = True
        logger.info("Loaded %d airports from %s", len(records), self.csv_path)

    def _read(self, reader: csv.DictReader) -> Iterable[AirportRecord]:
        header = reader.fieldnames or []
        missing = [c for c in (self.id_column, self.name_column) if c not in header]
        if missing:
            raise DatasetLoadError(
                f"Airport dataset {self.csv_path} is missing column(s): {', '.join(missing)}"
            )

        for row in reader:
            ident = row.get(self.id_column)
            name = row.get(self.name_column)
            # DictReader: None for short rows, extra values under the None key
            if ident is None or name is None or None in row:
                raise DatasetLoadError(
                    f"Malformed row at line {reader.line_num} in {self.csv_path}"
                )
            if not ident.strip():
                logger.debug("Skipping row at line %d: blank %s", reader.line_num, self.id_column)
                continue
            yield AirportRecord(icao=ident, name=name)

    def all(self) -> Tuple[AirportRecord, ...]:
        self.load()
        return self._all

    def __len__(self) -> int:
        return len(self.all())
