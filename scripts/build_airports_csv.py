#!/usr/bin/env python3
from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import List, Optional
import httpx

OURAIRPORTS_AIRPORTS_CSV = "https://davidmegginson.github.io/ourairports-data/airports.csv"

OUT_PATH = Path("app/data/airports.csv")

# Columns the loader reads (see AirportsRepo id_column / name_column)
OUT_FIELDS = ["ident", "name"]

def main(argv: List[str]) -> int:
    """
    Usage: build_airports_csv.py [ISO_COUNTRY]
    Without a country code every airport in OurAirports is kept.
    """
    country: Optional[str] = argv[1].strip().upper() if len(argv) > 1 else None

    print(f"[download] {OURAIRPORTS_AIRPORTS_CSV}")
    r = httpx.get(OURAIRPORTS_AIRPORTS_CSV, timeout=30.0)
    r.raise_for_status()

    reader = csv.DictReader(r.text.splitlines())
    rows = []
    seen = set()

    for row in reader:
        if country and (row.get("iso_country") or "").strip().upper() != country:
            continue

        ident = (row.get("ident") or "").strip()
        if not ident or ident in seen:
            continue
        seen.add(ident)

        rows.append({"ident": ident, "name": (row.get("name") or "").strip()})

    OUT_PATH.parent.mkdir(parents=True, exist_ok=True)

    with OUT_PATH.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=OUT_FIELDS)
        writer.writeheader()
        writer.writerows(rows)

    print(f"[ok] wrote {len(rows):,} airports -> {OUT_PATH.as_posix()}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
