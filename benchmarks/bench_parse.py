"""Compare eager and lazy reference dates, with and without calendar units.

Run with: python benchmarks/bench_parse.py
"""

import timeit
from datetime import datetime, timezone

from parse_interval import parse_with_date, parse_with_lazy_date

CASES = {
    "fixed units": "5 days 3 hours 10 minutes",
    "calendar units": "2 years 6 months",
}
NUMBER = 20000


def _now() -> datetime:
    return datetime.now(timezone.utc)


def main() -> None:
    for label, text in CASES.items():
        eager = timeit.timeit(lambda: parse_with_date(text, _now()), number=NUMBER)
        lazy = timeit.timeit(lambda: parse_with_lazy_date(text, _now), number=NUMBER)
        print(f"{label:>15}: eager {eager / NUMBER * 1e6:6.2f}us  lazy {lazy / NUMBER * 1e6:6.2f}us")


if __name__ == "__main__":
    main()
