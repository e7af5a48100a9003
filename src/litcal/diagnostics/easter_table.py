from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import litcal


DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("Ash Wed", "ash_wednesday"),
    ("Easter", "easter"),
    ("Ascension", "ascension"),
    ("Pentecost", "pentecost"),
    ("Advent 1", "advent1"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse anchor columns from CLI.
    Example:
      --columns "Easter=easter,Christ King=christ_king"
    Bare anchor names are used as their own headers:
      --columns "easter,trinity"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, anchor = it.split("=", 1)
            out.append((name.strip(), anchor.strip()))
        else:
            out.append((it, it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of Easter and its dependent anchor dates.")
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument(
        "--columns",
        type=str,
        default="",
        help='Comma list like "Easter=easter,Pentecost=pentecost" (default: Ash Wed, Easter, Ascension, Pentecost, Advent 1).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=3,
        help="After the table, list the Easters that fall in this month (default: 3=March).",
    )
    args = p.parse_args(argv)

    columns = parse_columns(args.columns) if args.columns else DEFAULT_COLUMNS

    def fmt(d) -> str:
        if d is None:
            return "-"
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in columns]
    colw = [5] + [max(10 if args.dates == "iso" else 5, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[date] = []
    for Y in range(Y0, Y1 + 1):
        a = litcal.anchors(Y)
        row = [str(Y).ljust(colw[0])]
        for (_, anchor), w in zip(columns, colw[1:]):
            if anchor not in a:
                raise SystemExit(f"Unknown anchor '{anchor}'. Available: {sorted(a)}")
            row.append(fmt(a[anchor]).ljust(w))
        print("  ".join(row))
        if a["easter"].month == args.list_month:
            hits.append(a["easter"])

    print(f"\nEaster occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0
    for d in sorted(hits, key=lambda x: (x.month, x.day, x.year)):
        print(d.isoformat())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
