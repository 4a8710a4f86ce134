"""커스텀 예외 정의 (Structured Exception Hierarchy)

매칭 실패(NOT_FOUND)와 모호한 매칭(REVIEW)은 예외가 아니라 MatchResult 값으로
표현합니다. 여기에는 입력 계약 위반과 사용 순서 오류만 둡니다.
"""
from typing import Any, Optional


class CatalogMatcherException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(CatalogMatcherException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidProductRecordException(ValidationException):
    """카탈로그 상품 레코드가 인덱스에 들어갈 수 없을 때 (header 누락 등)"""
    def __init__(self, reason: str, product_id: Any = None, details: Optional[dict[str, Any]] = None):
        super().__init__("product", reason, details or {"product_id": product_id, "reason": reason})
        self.error_code = "INVALID_PRODUCT_RECORD"
        self.product_id = product_id


# 카탈로그 스냅샷 관련 예외
class CatalogNotLoadedException(CatalogMatcherException):
    """카탈로그가 아직 게시(publish)되지 않은 상태에서 매칭 요청"""
    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__("Catalog snapshot has not been published yet", "CATALOG_NOT_LOADED", details)
