from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

import ethiocal
from ethiocal.core.epochs import Era
from ethiocal.core.errors import EthiocalError

_ERA_CHOICES = {"alem": Era.AMETE_ALEM, "mihret": Era.AMETE_MIHRET}
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


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


def _era_arg(args: argparse.Namespace):
    return None if args.era is None else _ERA_CHOICES[args.era]


def _add_era(p: argparse.ArgumentParser, help_text: str) -> None:
    p.add_argument("--era", choices=sorted(_ERA_CHOICES), default=None, help=help_text)


def cmd_to_gregorian(args: argparse.Namespace) -> int:
    y, m, d = ethiocal.parse_ymd(args.date)
    print(ethiocal.ethiopic_to_gregorian(y, m, d, era=_era_arg(args)))
    return 0


def cmd_to_ethiopic(args: argparse.Namespace) -> int:
    y, m, d = ethiocal.parse_ymd(args.date)
    print(ethiocal.gregorian_to_ethiopic(y, m, d))
    return 0


def cmd_jdn(args: argparse.Namespace) -> int:
    y, m, d = ethiocal.parse_ymd(args.date)
    if args.calendar == "ethiopic":
        print(ethiocal.ethiopic_to_jdn(y, m, d, era=_era_arg(args)))
    else:
        print(ethiocal.gregorian_to_jdn(y, m, d))
    return 0


def cmd_from_jdn(args: argparse.Namespace) -> int:
    if args.calendar == "ethiopic":
        era = _era_arg(args)
        if era is None:
            era = ethiocal.guess_era(args.jdn)
        print(ethiocal.jdn_to_ethiopic(args.jdn, era=era))
    else:
        print(ethiocal.jdn_to_gregorian(args.jdn))
    return 0


def cmd_weekday(args: argparse.Namespace) -> int:
    dow = ethiocal.get_day_of_week(args.jdn)
    print(f"{dow} {_DAY_NAMES[dow]}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    y, m, d = ethiocal.parse_ymd(args.date)
    if args.calendar == "ethiopic":
        ok = ethiocal.is_valid_ethiopic_date(y, m, d)
    else:
        ok = ethiocal.is_valid_gregorian_date(y, m, d)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_today(args: argparse.Namespace) -> int:
    g = ethiocal.GregorianDate.today()
    e = g.to_ethiopic()
    print(f"Gregorian: {g}")
    print(f"Ethiopian: {e}")
    print(f"JDN:       {g.jdn}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopian <-> Gregorian calendar conversion.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_e2g = sub.add_parser("to-gregorian", help="Ethiopian -> Gregorian")
    p_e2g.add_argument("date", help="Ethiopian YYYY-MM-DD")
    _add_era(p_e2g, "era of the input year (default: auto-detect)")
    p_e2g.set_defaults(func=cmd_to_gregorian)

    p_g2e = sub.add_parser("to-ethiopic", help="Gregorian -> Ethiopian")
    p_g2e.add_argument("date", help="Gregorian YYYY-MM-DD")
    p_g2e.set_defaults(func=cmd_to_ethiopic)

    p_jdn = sub.add_parser("jdn", help="Date -> Julian Day Number (not validated)")
    p_jdn.add_argument("calendar", choices=["ethiopic", "gregorian"])
    p_jdn.add_argument("date", help="YYYY-MM-DD")
    _add_era(p_jdn, "Ethiopian era (default: mihret)")
    p_jdn.set_defaults(func=cmd_jdn)

    p_from = sub.add_parser("from-jdn", help="Julian Day Number -> date")
    p_from.add_argument("jdn", type=int)
    p_from.add_argument("calendar", choices=["ethiopic", "gregorian"])
    _add_era(p_from, "Ethiopian era (default: guessed from the JDN)")
    p_from.set_defaults(func=cmd_from_jdn)

    p_dow = sub.add_parser("weekday", help="Day of week for a JDN (0 = Monday)")
    p_dow.add_argument("jdn", type=int)
    p_dow.set_defaults(func=cmd_weekday)

    p_val = sub.add_parser("validate", help="Check that a date exists (exit status 1 if not)")
    p_val.add_argument("calendar", choices=["ethiopic", "gregorian"])
    p_val.add_argument("date", help="YYYY-MM-DD")
    p_val.set_defaults(func=cmd_validate)

    p_today = sub.add_parser("today", help="Today's date in both calendars")
    p_today.set_defaults(func=cmd_today)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")
    p_diag.set_defaults(func=None)

    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ethiocal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.func(args)
    except (EthiocalError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
