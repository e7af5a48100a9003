from __future__ import annotations

from datetime import date
import calendar as pycal
import argparse

import litcal
from litcal.core.types import Grade

GRADE_TAGS = {
    Grade.WEEKDAY: "",
    Grade.COMMEMORATION: "c",
    Grade.MEMORIAL_OPT: "m",
    Grade.MEMORIAL: "M",
    Grade.FEAST: "F",
    Grade.FEAST_LORD: "FL",
    Grade.SOLEMNITY: "S",
    Grade.HIGHER_SOLEMNITY: "S*",
}


def dow_header(w: int) -> str:
    return " ".join(x.ljust(w) for x in ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"))


def cell(top: str, bot: str, w: int) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], w: int) -> None:
    print(title)
    print(dow_header(w))
    print("-" * len(dow_header(w)))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_calendar(cal, gy: int, gm: int, w: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() + 1) % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", "", w))
    for d in (date(gy, gm, k) for k in range(1, last.day + 1)):
        top = cal[d].celebrated
        if top is None:
            wk.append(cell(f"{d.day:2d}", "", w))
        else:
            tag = GRADE_TAGS[top.grade]
            color = top.color[0].value[0].upper()
            wk.append(cell(f"{d.day:2d} {color} {tag}", top.event_key, w))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", "", w))
        weeks.append(wk)

    scope = "/".join(str(j) for j in cal.jurisdictions)
    print_grid(f"{gy}-{gm:02d}  ({scope}, cycle {cal.sunday_cycle}/{cal.weekday_cycle})", weeks, w)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Gregorian month grids labelled with each day's celebration."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 12)")
    p.add_argument("--months", type=int, default=1, help="Number of consecutive months (default: 1)")
    p.add_argument("--nation", default=None)
    p.add_argument("--diocese", default=None)
    p.add_argument("--region", default=None)
    p.add_argument("--width", type=int, default=14, help="Cell width (default: 14)")
    args = p.parse_args(argv)

    gy, gm = args.greg if args.greg else (2024, 12)
    cals = {}
    for i in range(args.months):
        y, m = gy + (gm - 1 + i) // 12, (gm - 1 + i) % 12 + 1
        if y not in cals:
            cals[y], _ = litcal.compute_calendar(
                y, nation=args.nation, diocese=args.diocese, wider_region=args.region,
            )
        month_calendar(cals[y], y, m, args.width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
