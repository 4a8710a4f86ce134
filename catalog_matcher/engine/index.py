"""
Product Index - read-only lookup structures for catalog matching.

Built once per catalog snapshot:
- by_id: id -> record (last write wins for repeated ids)
- by_normalized_code: normalized code -> records (articul, sync uid, flat codes, analog codes)
- by_normalized_header: normalized header -> records (insertion order)
- token_to_ids: header token -> ids

The index is never mutated after build_product_index returns; a catalog
refresh builds a new one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from catalog_matcher.core.logging import logger
from catalog_matcher.schemas.catalog_schema import ProductRecord
from catalog_matcher.utils.text import normalize_code, normalize_header, tokenize


@dataclass(frozen=True)
class ProductIndex:
    """
    Indexed catalog snapshot.

    Attributes:
        by_id: id -> ProductRecord
        by_normalized_code: normalized code -> tuple of records
        by_normalized_header: normalized header -> tuple of records
        token_to_ids: token -> frozenset of ids
        normalized_header_by_id: cached normalize_header(record.header)
        tokens_by_id: cached tokenize of the normalized header
        position_by_id: insertion position of each id (stable tie-break order)
    """
    by_id: Mapping[int, ProductRecord]
    by_normalized_code: Mapping[str, tuple[ProductRecord, ...]]
    by_normalized_header: Mapping[str, tuple[ProductRecord, ...]]
    token_to_ids: Mapping[str, frozenset[int]]
    normalized_header_by_id: Mapping[int, str]
    tokens_by_id: Mapping[int, tuple[str, ...]]
    position_by_id: Mapping[int, int]

    def __len__(self) -> int:
        return len(self.by_id)

    def lookup_code(self, normalized_code: str) -> tuple[ProductRecord, ...]:
        """Look up records by an already-normalized code."""
        return self.by_normalized_code.get(normalized_code, ())

    def lookup_header(self, normalized_header: str) -> tuple[ProductRecord, ...]:
        """Look up records by an already-normalized header."""
        return self.by_normalized_header.get(normalized_header, ())

    def ids_for_token(self, token: str) -> frozenset[int]:
        return self.token_to_ids.get(token, frozenset())


def _append(target: dict, key, value) -> None:
    if key not in target:
        target[key] = []
    target[key].append(value)


def _add_code(by_code: dict[str, list[ProductRecord]], code: Optional[str], record: ProductRecord) -> int:
    if not code:
        return 0
    normalized = normalize_code(code)
    if not normalized:
        return 0
    _append(by_code, normalized, record)
    return 1


def build_product_index(records: Iterable[ProductRecord]) -> ProductIndex:
    """
    Build lookup index from catalog records.

    Args:
        records: ProductRecord list (already validated: header non-empty)

    Returns:
        Immutable ProductIndex
    """
    by_id: dict[int, ProductRecord] = {}
    by_code: dict[str, list[ProductRecord]] = {}
    by_header: dict[str, list[ProductRecord]] = {}
    token_ids: dict[str, set[int]] = {}
    header_by_id: dict[int, str] = {}
    tokens_by_id: dict[int, tuple[str, ...]] = {}
    code_entries = 0

    for record in records:
        by_id[record.id] = record

        normalized_header = normalize_header(record.header)
        header_by_id[record.id] = normalized_header
        tokens_by_id[record.id] = tuple(tokenize(normalized_header))
        _append(by_header, normalized_header, record)

        for code in record.code_values():
            code_entries += _add_code(by_code, code, record)

        # 레코드 내 중복 토큰은 한 번만
        for token in dict.fromkeys(tokens_by_id[record.id]):
            if token not in token_ids:
                token_ids[token] = set()
            token_ids[token].add(record.id)

    index = ProductIndex(
        by_id=MappingProxyType(by_id),
        by_normalized_code=MappingProxyType({k: tuple(v) for k, v in by_code.items()}),
        by_normalized_header=MappingProxyType({k: tuple(v) for k, v in by_header.items()}),
        token_to_ids=MappingProxyType({k: frozenset(v) for k, v in token_ids.items()}),
        normalized_header_by_id=MappingProxyType(header_by_id),
        tokens_by_id=MappingProxyType(tokens_by_id),
        position_by_id=MappingProxyType({pid: pos for pos, pid in enumerate(by_id)}),
    )

    logger.debug(
        f"Product index built: products={len(by_id)}, codes={len(by_code)} "
        f"(entries={code_entries}), headers={len(by_header)}, tokens={len(token_ids)}"
    )
    return index
