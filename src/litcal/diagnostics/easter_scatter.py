#!/usr/bin/env python3
"""
litcal.diagnostics.easter_scatter
---------------------------------
Easter dates across a range of years: a scatter of the date against the
year beside a histogram of how often each of the 35 possible dates occurs.
"""

from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional, Tuple

import litcal

# Easter falls between Mar 22 and Apr 25
EARLIEST = 1
LATEST = 35


def _need_plotting():
    try:
        import numpy as np
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise RuntimeError('Need numpy and matplotlib. Install: pip install "litcal[diagnostics]"') from e
    return np, plt


def days_after_equinox(d: date) -> int:
    """Days after the ecclesiastical equinox (Mar 21)."""
    return (d - date(d.year, 3, 21)).days


def easter_offsets(start_year: int, end_year: int) -> List[Tuple[int, int]]:
    return [(y, days_after_equinox(litcal.easter(y))) for y in range(start_year, end_year + 1)]


def offset_label(offset: int) -> str:
    d = date(2001, 3, 21) + timedelta(days=offset)
    return f"{d:%b} {d.day}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot and histogram of Easter dates across years.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)
    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np, plt = _need_plotting()
    data = np.array(easter_offsets(args.start_year, args.end_year))
    years, offsets = data[:, 0], data[:, 1]
    counts = np.bincount(offsets, minlength=LATEST + 1)[EARLIEST:]

    fig, (ax, hist) = plt.subplots(
        1, 2, figsize=(10, 4.8), sharey=True, gridspec_kw={"width_ratios": (3, 1)}, constrained_layout=True
    )
    ax.scatter(years, offsets, s=10, color="tab:purple", alpha=0.6)
    ax.set_xlabel("Gregorian year")
    ax.set_title(f"Easter Sunday, {args.start_year}-{args.end_year}")
    ax.grid(True, color="0.88", linewidth=0.7)

    ticks = list(range(EARLIEST, LATEST + 1, 7))
    ax.set_yticks(ticks)
    ax.set_yticklabels([offset_label(t) for t in ticks])

    hist.barh(np.arange(EARLIEST, LATEST + 1), counts, color="tab:purple", alpha=0.6)
    hist.set_xlabel("Years")

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
