"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import TYPE_CHECKING

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from catalog_matcher.engine.matcher import MatchThresholds


class Settings(BaseSettings):
    """매칭 엔진 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # 매칭 임계값
    # - match_ok_threshold: FUZZY 단계에서 자동 확정(OK) 최소 점수
    # - match_review_threshold: 사람 검토(REVIEW)로 남길 최소 점수
    # - match_gap_threshold: 1위와 2위 후보 점수 차이 최소값
    match_ok_threshold: float = 0.90
    match_review_threshold: float = 0.72
    match_gap_threshold: float = 0.08

    # 로깅
    log_level: str = "INFO"

    @field_validator("match_ok_threshold", "match_review_threshold", "match_gap_threshold")
    @classmethod
    def validate_threshold_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("match thresholds must be within [0, 1]")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    def match_thresholds(self) -> "MatchThresholds":
        """설정값으로 MatchThresholds 생성"""
        from catalog_matcher.engine.matcher import MatchThresholds

        return MatchThresholds(
            ok=self.match_ok_threshold,
            review=self.match_review_threshold,
            gap=self.match_gap_threshold,
        )


settings = Settings()
