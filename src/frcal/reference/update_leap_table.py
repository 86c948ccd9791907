#!/usr/bin/env python3
from __future__ import annotations

import argparse
import csv
import os
from pathlib import Path
from typing import List, Optional, Tuple

from .equinox import new_year_jdns

DEFAULT_YEARS = 3000
HEADER = ["year", "new_year_jdn", "leap"]


def build_rows(first_year: int, count: int) -> List[Tuple[int, int, int]]:
    """
    Rows (year, new_year_jdn, leap) for FRC years first_year .. first_year + count - 1.
    """
    starts = new_year_jdns(first_year, count)
    rows = []
    for y, (a, b) in enumerate(zip(starts, starts[1:]), first_year):
        length = b - a
        if length not in (365, 366):
            raise RuntimeError(f"FRC year {y} would last {length} days")
        rows.append((y, a, int(length == 366)))
    return rows


def default_output_path() -> Path:
    # default: user cache (works for non-editable installs)
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        base = Path(xdg) / "frcal"
    else:
        base = Path.home() / ".cache" / "frcal"
    return base / "leap_years_equinox.csv"


def write_rows(out: Path, rows: List[Tuple[int, int, int]]) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, lineterminator="\n")
        w.writerow(HEADER)
        w.writerows(rows)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Regenerate the equinox-rule leap year table.")
    p.add_argument("--years", type=int, default=DEFAULT_YEARS, help=f"Number of FRC years from An I (default: {DEFAULT_YEARS})")
    p.add_argument("--out", default=None, help="Output CSV path (default: ~/.cache/frcal/leap_years_equinox.csv)")
    p.add_argument("--also-write-package", action="store_true",
                   help="Also overwrite src/frcal/reference/data/leap_years_equinox.csv (for repo maintenance).")
    args = p.parse_args(argv)

    if args.years <= 0:
        p.error("--years must be positive")

    print(f"Computing {args.years} Paris equinoxes ...")
    rows = build_rows(1, args.years)
    leaps = sum(r[2] for r in rows)
    print(f"Years 1..{rows[-1][0]}: {leaps} sextile years")

    out = Path(args.out) if args.out else default_output_path()
    write_rows(out, rows)
    print(f"Wrote: {out}")

    if args.also_write_package:
        pkg = Path(__file__).resolve().parent / "data" / "leap_years_equinox.csv"
        write_rows(pkg, rows)
        print(f"Also wrote package table: {pkg}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
