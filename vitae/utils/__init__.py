"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logging setup
- Date formatting
- Display text helpers
- PDF inspection
"""

from vitae.utils.timestamp import format_month_year, now, parse_partial_date

__all__ = ["format_month_year", "now", "parse_partial_date"]
