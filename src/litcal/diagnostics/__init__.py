"""Diagnostics package.

- easter_table, pretty_month, transfers: plain-text tables
- easter_scatter: optional (requires the diagnostics extra: numpy, matplotlib)
"""

__all__ = ["easter_table", "pretty_month", "transfers", "easter_scatter"]
