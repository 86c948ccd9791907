from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Tuple

log = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^-?\d{1,}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _engine_arg(p: argparse.ArgumentParser, *, required: bool = True) -> None:
    p.add_argument("--engine", required=required, help="equinox | romme | historical")


def _print_date(t) -> None:
    import frcal
    from frcal.names import weekday_name

    print(f"{frcal.format_date(t)}  ({t.year}-{t.month:02d}-{t.day:02d}, {weekday_name(t.month, t.day)})")


def cmd_convert(argv: list[str]) -> int:
    import frcal

    p = argparse.ArgumentParser(prog="frcal convert", description="Gregorian -> FRC date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD (proleptic Gregorian)")
    _engine_arg(p)
    args = p.parse_args(argv)
    log.debug("engine %s: %s", args.engine, frcal.engine_info(args.engine))

    _print_date(frcal.from_gregorian(args.date, engine=args.engine))
    return 0


def cmd_reverse(argv: list[str]) -> int:
    import frcal

    p = argparse.ArgumentParser(prog="frcal reverse", description="FRC date -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1..13 (13 = jours complémentaires)")
    p.add_argument("day", type=int)
    _engine_arg(p)
    args = p.parse_args(argv)

    eng = frcal.get_engine(args.engine)
    t = frcal.FrcDate(engine=eng.id, year=args.year, month=args.month, day=args.day)
    print(frcal.to_gregorian(t).isoformat())
    return 0


def cmd_today(argv: list[str]) -> int:
    import frcal

    p = argparse.ArgumentParser(prog="frcal today", description="Today's FRC date")
    _engine_arg(p)
    p.add_argument("--local", action="store_true", help="use the host time zone instead of UTC")
    args = p.parse_args(argv)
    log.debug("engine %s: %s", args.engine, frcal.engine_info(args.engine))

    _print_date(frcal.today(engine=args.engine, local=args.local))
    return 0


def cmd_leap(argv: list[str]) -> int:
    import frcal

    p = argparse.ArgumentParser(prog="frcal leap", description="Is an FRC year sextile?")
    p.add_argument("year", type=int)
    _engine_arg(p, required=False)
    args = p.parse_args(argv)

    names = [args.engine] if args.engine else frcal.list_engines()
    for name in names:
        try:
            leap = frcal.is_leap_year(args.year, engine=name)
        except frcal.OutOfRange:
            if args.engine:
                raise
            print(f"{name:<11} An {args.year}: out of table range")
            continue
        print(f"{name:<11} An {args.year}: {'sextile' if leap else 'common'}")
    return 0


def cmd_engines(argv: list[str]) -> int:
    import frcal

    argparse.ArgumentParser(prog="frcal engines", description="List registered engines").parse_args(argv)
    for name in frcal.list_engines():
        info = frcal.engine_info(name)
        print(f"{name:<11} {info['rule']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="frcal", description="French Republican Calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Gregorian -> FRC date")
    sub.add_parser("reverse", help="FRC date -> Gregorian")
    sub.add_parser("today", help="Today's FRC date")
    sub.add_parser("leap", help="Leap status of an FRC year")
    sub.add_parser("engines", help="List registered engines")
    sub.add_parser("update-table", help="Regenerate the equinox leap year table")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from frcal.core.errors import FrcalError

    commands = {
        "convert": cmd_convert,
        "reverse": cmd_reverse,
        "today": cmd_today,
        "leap": cmd_leap,
        "engines": cmd_engines,
    }

    try:
        if args.cmd == "update-table":
            return _run_module_main("frcal.reference.update_leap_table", rest)
        return commands[args.cmd](rest)
    except FrcalError as e:
        print(f"frcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
