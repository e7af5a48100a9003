from __future__ import annotations

import argparse
from datetime import date
import json
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _add_jurisdiction_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", default="en", help="Locale tag, e.g. en, la, it, pt_BR (default: en)")
    p.add_argument("--nation", default=None, help="Nation code, e.g. IT, US")
    p.add_argument("--diocese", default=None, help="Diocese code, e.g. ROME")
    p.add_argument("--region", default=None, help="Wider region code, e.g. EUROPE")
    p.add_argument("--catalog", action="append", default=[], help="Extra catalog JSON file (repeatable)")
    p.add_argument(
        "--jurisdiction-order",
        default=None,
        help='Comma list, strongest first (default: "diocesan,national,widerregion,universal")',
    )
    p.add_argument("-v", "--verbose", action="count", default=0)


def _calendar_kwargs(args: argparse.Namespace) -> dict:
    from litcal.catalogs.loader import load_catalog
    from litcal.core.errors import ConfigurationError
    from litcal.core.types import CalendarConfig, PrecedenceTable

    config = CalendarConfig()
    if args.jurisdiction_order:
        order = tuple(x.strip().lower() for x in args.jurisdiction_order.split(",") if x.strip())
        try:
            table = PrecedenceTable(jurisdiction_order=order)
        except (ValueError, ConfigurationError) as e:
            raise SystemExit(f"Invalid --jurisdiction-order: {e}")
        config = config.tweak(precedence=table)
    return {
        "locale": args.locale,
        "nation": args.nation,
        "diocese": args.diocese,
        "wider_region": args.region,
        "overlay_sources": [load_catalog(p) for p in args.catalog],
        "config": config,
    }


def _format_entry(e) -> str:
    line = f"  [{e.outcome.value:<16}] {e.grade.name:<16} {e.name}"
    if e.transferred_from is not None:
        line += f"  (from {e.transferred_from.isoformat()})"
    if e.transferred_to is not None:
        line += f"  (to {e.transferred_to.isoformat()})"
    if e.jurisdiction.code is not None:
        line += f"  <{e.jurisdiction}>"
    return line


def cmd_easter(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal easter", description="Date of Easter Sunday")
    p.add_argument("year", type=int)
    p.add_argument("--to-year", type=int, default=None, help="Print every year up to this one")
    p.add_argument("--anchors", action="store_true", help="Print all anchor dates of the year")
    args = p.parse_args(argv)

    if args.anchors:
        for name, d in litcal.anchors(args.year).items():
            print(f"{name:<30} {d.isoformat() if d else '-'}")
        return 0

    last = args.to_year if args.to_year is not None else args.year
    for y in range(args.year, last + 1):
        print(f"{y}  {litcal.easter(y).isoformat()}")
    return 0


def cmd_day(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal day", description="Resolved celebrations of one date")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD")
    _add_jurisdiction_args(p)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--list-attrs", action="store_true", help="List the attribute names and exit")
    p.add_argument("--explain", action="store_true", help="Print the resolution with its diagnostics as JSON")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    if args.list_attrs:
        for name in litcal.list_attributes():
            print(name)
        return 0
    if args.date is None:
        p.error("the following arguments are required: date")

    d = _parse_ymd(args.date)
    kwargs = _calendar_kwargs(args)
    if args.explain:
        print(json.dumps(litcal.explain(d, **kwargs), indent=2, ensure_ascii=False))
        return 0

    day = litcal.day_info(d, attributes=tuple(args.attr), **kwargs)
    season = day.celebrated.season if day.celebrated is not None else None
    print(f"{d.isoformat()}  {litcal.season_name(season, locale=args.locale)}" if season else d.isoformat())
    for e in day.entries:
        print(_format_entry(e))
    if day.attributes:
        for k, v in day.attributes.items():
            print(f"  {k}: {v}")
    return 0


def cmd_calendar(argv: list[str]) -> int:
    import litcal
    from litcal.core.types import YearType

    p = argparse.ArgumentParser(prog="litcal calendar", description="Resolved calendar of a year")
    p.add_argument("year", type=int)
    _add_jurisdiction_args(p)
    p.add_argument("--year-type", choices=("civil", "liturgical"), default="civil")
    p.add_argument("--json", action="store_true", help="Print the calendar as JSON")
    p.add_argument("--all", action="store_true", help="Also print suppressed and transferred-from records")
    p.add_argument("--diagnostics", action="store_true", help="Print diagnostics after the calendar")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    cal, diag = litcal.compute_calendar(args.year, year_type=YearType(args.year_type.upper()), **_calendar_kwargs(args))

    if args.json:
        out = cal.to_dict()
        if args.diagnostics:
            out = {"calendar": out, "diagnostics": diag.to_dict()}
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    scope = "/".join(str(j) for j in cal.jurisdictions)
    print(f"{cal.year} ({cal.year_type.value.lower()}, {scope}, {cal.locale})  Easter {cal.easter.isoformat()}"
          f"  cycles {cal.sunday_cycle}/{cal.weekday_cycle}")
    shown = {"celebrated", "transferred_to", "commemorated"}
    for d in cal:
        entries = [e for e in cal[d].entries if args.all or e.outcome.value in shown]
        if not entries:
            continue
        print(d.isoformat())
        for e in entries:
            print(_format_entry(e))

    if args.diagnostics:
        print()
        for e in diag:
            print(f"{e.kind.value:<20} {e.message}")
    return 0


def cmd_name(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal name", description="Generated name of a ferial event key")
    p.add_argument("key", nargs="+")
    p.add_argument("--locale", default="en")
    args = p.parse_args(argv)

    rc = 0
    for key in args.key:
        name = litcal.ferial_name(key, locale=args.locale)
        if name is None:
            print(f"{key}: (not a ferial key)")
            rc = 1
        else:
            print(f"{key}: {name}")
    return rc


def cmd_catalogs(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal catalogs", description="List registered catalogs")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    infos = {name: litcal.catalog_info(name) for name in litcal.list_catalogs()}
    if args.json:
        print(json.dumps(infos, indent=2, ensure_ascii=False))
        return 0
    for name, info in infos.items():
        print(f"{name:<15} {info['jurisdiction']:<22} {info['events']:>4} events  {info['name']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `litcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="litcal", description="Liturgical calendar computation CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("easter", help="Date of Easter Sunday (and anchors)")
    sub.add_parser("day", help="Resolved celebrations of one date")
    sub.add_parser("calendar", help="Resolved calendar of a year")
    sub.add_parser("name", help="Generated name of a ferial event key")
    sub.add_parser("catalogs", help="List registered catalogs")

    # diagnostics
    sub.add_parser("easter-table", help="Print Easter/anchor table (diagnostics)")
    sub.add_parser("pretty-month", help="Print month grids of celebrations (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["easter-scatter", "transfers"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "easter": cmd_easter,
        "day": cmd_day,
        "calendar": cmd_calendar,
        "name": cmd_name,
        "catalogs": cmd_catalogs,
    }
    if args.cmd in commands:
        from litcal.core.errors import LitcalError
        try:
            return commands[args.cmd](rest)
        except LitcalError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    if args.cmd == "easter-table":
        return _run_module_main("litcal.diagnostics.easter_table", rest)

    if args.cmd == "pretty-month":
        return _run_module_main("litcal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "easter-scatter": "litcal.diagnostics.easter_scatter",
            "transfers": "litcal.diagnostics.transfers",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
