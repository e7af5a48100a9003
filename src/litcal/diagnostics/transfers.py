from __future__ import annotations

import argparse

import litcal
from litcal.core.types import DiagnosticKind


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="List transferred and unresolved celebrations over a range of years.")
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--nation", default=None)
    p.add_argument("--diocese", default=None)
    p.add_argument("--region", default=None)
    p.add_argument("--suppressed", action="store_true", help="Also list suppressed non-weekday celebrations.")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    kinds = {DiagnosticKind.TRANSFER, DiagnosticKind.UNRESOLVED_TRANSFER}
    if args.suppressed:
        kinds.add(DiagnosticKind.SUPPRESSION)

    print(f"{'From':<10}  {'To':<10}  {'Kind':<20}  Event")
    print("-" * 64)
    total = 0
    for Y in range(Y0, Y1 + 1):
        _, diag = litcal.compute_calendar(Y, nation=args.nation, diocese=args.diocese, wider_region=args.region)
        for e in diag:
            if e.kind not in kinds:
                continue
            on = e.on.isoformat() if e.on else "-"
            to = e.target.isoformat() if e.target else "-"
            print(f"{on:<10}  {to:<10}  {e.kind.value:<20}  {e.event_key} ({e.jurisdiction})")
            total += 1
    print(f"\n{total} record(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
