"""Misc text utils (quantity parsing)."""

from .quantity import ParsedQty, normalize_unit, parse_qty, strip_qty

__all__ = [
    "ParsedQty",
    "normalize_unit",
    "parse_qty",
    "strip_qty",
]
