"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 카탈로그/매처 fixture 제공

금지:
- 네트워크/저장소 접근
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from catalog_matcher.engine.matcher import Matcher  # noqa: E402
from catalog_matcher.schemas.catalog_schema import ProductRecord, load_product_records  # noqa: E402
from catalog_matcher.schemas.query_schema import QueryLine  # noqa: E402
from tests.fixtures import (  # noqa: E402
    CATALOG_PAYLOADS,
    DUPLICATE_CODE_PAYLOADS,
    DUPLICATE_HEADER_PAYLOADS,
    QUERY_LINES,
)


@pytest.fixture
def catalog_records() -> list[ProductRecord]:
    """기본 카탈로그 (케이블 2종 + 자동차단기)"""
    return load_product_records(CATALOG_PAYLOADS, strict=True)


@pytest.fixture
def matcher(catalog_records: list[ProductRecord]) -> Matcher:
    return Matcher.from_records(catalog_records)


@pytest.fixture
def duplicate_code_matcher() -> Matcher:
    """DUP1 코드를 공유하는 두 상품"""
    return Matcher.from_records(load_product_records(DUPLICATE_CODE_PAYLOADS, strict=True))


@pytest.fixture
def duplicate_header_matcher() -> Matcher:
    """정규화 header 가 같은 두 상품"""
    return Matcher.from_records(load_product_records(DUPLICATE_HEADER_PAYLOADS, strict=True))


@pytest.fixture
def query_line():
    """QUERY_LINES 의 이름으로 QueryLine 생성 (필드 덮어쓰기 가능)"""

    def _make(name: str, **overrides) -> QueryLine:
        data = dict(QUERY_LINES[name])
        data.update(overrides)
        return QueryLine.model_validate(data)

    return _make
