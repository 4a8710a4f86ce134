"""카탈로그 상품 스키마 및 수집(ingestion) 검증"""
import math
from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from catalog_matcher.core.exceptions import InvalidProductRecordException
from catalog_matcher.core.logging import logger


FLAT_CODE_FIELDS = ("elcom", "manufacturer", "raec", "pc", "etm")


class FlatCodes(BaseModel):
    """코드 계열별 평면 코드"""
    model_config = ConfigDict(frozen=True)

    elcom: Optional[str] = Field(None, description="Elcom 코드")
    manufacturer: Optional[str] = Field(None, description="제조사 코드")
    raec: Optional[str] = Field(None, description="RAEC 코드")
    pc: Optional[str] = Field(None, description="PC 코드")
    etm: Optional[str] = Field(None, description="ETM 코드")

    def as_list(self) -> list[Optional[str]]:
        """인덱스 구축 순서대로 코드 값 반환"""
        return [getattr(self, name) for name in FLAT_CODE_FIELDS]


class ProductRecord(BaseModel):
    """카탈로그 상품 레코드

    - id 가 식별자, 나머지 필드는 레코드 간 중복 가능
    - header 는 trim 후 비어 있으면 안 됨 (인덱스에 들어가기 전에 거부)
    - raw 는 원본 payload (export/디버그용), 매칭 로직은 참조하지 않음
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="상품 ID")
    sync_uid: Optional[str] = Field(None, description="동기화 UID")
    header: str = Field(..., description="상품명")
    articul: Optional[str] = Field(None, description="артикул (판매자 코드)")
    unit_header: Optional[str] = Field(None, description="단위명")
    manufacturer_header: Optional[str] = Field(None, description="제조사명")
    multiplicity_order: Optional[float] = Field(None, description="주문 배수")
    analog_codes: tuple[str, ...] = Field(default_factory=tuple, description="대체 코드")
    flat_codes: FlatCodes = Field(default_factory=FlatCodes, description="평면 코드")
    updated_at: Optional[str] = Field(None, description="갱신 시각")
    raw: dict[str, Any] = Field(default_factory=dict, repr=False, description="원본 payload")

    @field_validator("header")
    @classmethod
    def validate_header(cls, v: str) -> str:
        """header 검증: 공백만으로 구성 불가"""
        if not v or not v.strip():
            raise ValueError("header must not be empty")
        return v.strip()

    def __eq__(self, other: object) -> bool:
        # raw 는 비교 대상이 아님
        if not isinstance(other, ProductRecord):
            return NotImplemented
        return self.model_dump(exclude={"raw"}) == other.model_dump(exclude={"raw"})

    def __hash__(self) -> int:
        return hash(self.id)

    def code_values(self) -> list[Optional[str]]:
        """코드 인덱스에 들어갈 값들 (articul, sync_uid, 평면 코드, 대체 코드 순)"""
        return [self.articul, self.sync_uid, *self.flat_codes.as_list(), *self.analog_codes]

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "ProductRecord":
        """카탈로그 API payload(camelCase) → ProductRecord

        알 수 없는 키는 무시하고 원본은 raw 로 보관합니다.

        Raises:
            InvalidProductRecordException: header 누락, id 오류 등
        """
        product_id = raw.get("id")
        header = str(raw.get("header") or "").strip()
        if not header:
            raise InvalidProductRecordException("payload missing header", product_id=product_id)

        try:
            parsed_id = int(product_id)
        except (TypeError, ValueError):
            raise InvalidProductRecordException(f"invalid id: {product_id!r}", product_id=product_id)

        flat_raw = raw.get("flatCodes") or {}
        if not isinstance(flat_raw, dict):
            flat_raw = {}

        analog_raw = raw.get("analogCodes") or []
        if isinstance(analog_raw, (str, bytes)) or not isinstance(analog_raw, Iterable):
            analog_raw = [analog_raw]

        try:
            return cls(
                id=parsed_id,
                sync_uid=_to_str_or_none(raw.get("syncUid")),
                header=header,
                articul=_to_str_or_none(raw.get("articul")),
                unit_header=_to_str_or_none(raw.get("unitHeader")),
                manufacturer_header=_to_str_or_none(raw.get("manufacturerHeader")),
                multiplicity_order=_to_number_or_none(raw.get("multiplicityOrder")),
                analog_codes=tuple(str(v) for v in analog_raw if v is not None and str(v)),
                flat_codes=FlatCodes(**{name: _to_str_or_none(flat_raw.get(name)) for name in FLAT_CODE_FIELDS}),
                updated_at=_to_str_or_none(raw.get("updatedAt")),
                raw=raw,
            )
        except ValidationError as e:
            raise InvalidProductRecordException(str(e), product_id=product_id)


def _to_str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_number_or_none(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def load_product_records(payloads: Iterable[dict[str, Any]], strict: bool = False) -> list[ProductRecord]:
    """payload 목록을 ProductRecord 목록으로 변환

    Args:
        payloads: 카탈로그 저장소가 넘겨준 원본 payload 들
        strict: True 면 첫 번째 잘못된 레코드에서 예외 전파

    Returns:
        유효한 레코드 목록 (입력 순서 유지)
    """
    records: list[ProductRecord] = []
    rejected = 0

    for payload in payloads:
        try:
            records.append(ProductRecord.from_payload(payload))
        except InvalidProductRecordException as e:
            if strict:
                raise
            rejected += 1
            logger.warning(f"Skipping catalog record: {e}")

    if rejected:
        logger.info(f"Catalog ingestion: {len(records)} accepted, {rejected} rejected")

    return records
