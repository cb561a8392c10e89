"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """라이브러리 설정 (FUZZY_ 접두사 환경 변수)"""

    # 유사도 모드(threshold 지정 시)에서 사용할 기본 scorer
    default_scorer: str = "ratio"

    # 로깅
    log_level: str = "INFO"

    @field_validator("default_scorer")
    @classmethod
    def validate_default_scorer(cls, v: str) -> str:
        # 이름 검증은 get_scorer 에서 수행
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be a standard logging level name")
        return level

    class Config:
        env_prefix = "FUZZY_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
