"""Pydantic schemas (catalog records, query lines)."""

from .catalog_schema import FLAT_CODE_FIELDS, FlatCodes, ProductRecord, load_product_records
from .query_schema import ItemSource, QueryLine, normalize_items

__all__ = [
    "FLAT_CODE_FIELDS",
    "FlatCodes",
    "ProductRecord",
    "load_product_records",
    "ItemSource",
    "QueryLine",
    "normalize_items",
]
