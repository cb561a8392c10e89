"""로깅 설정"""
import logging
import sys
import os
from typing import Any

from fuzzy_predicate.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    """로거 초기화 및 설정"""

    logger = logging.getLogger("fuzzy_predicate")

    # Production에서는 최소 INFO 레벨
    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level))

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))

    if IS_PRODUCTION:
        # Production: 최소 정보만
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        # Development: 상세 정보
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: Any, max_length: int = 100) -> str:
    """로깅용 문자열 반환 (repr + 길이 제한)

    검색어/후보값은 임의의 사용자 데이터이므로 그대로 찍지 않고
    repr로 감싼 뒤 잘라낸다.

    Args:
        value: 로깅할 값
        max_length: 최대 길이

    Returns:
        로깅용 문자열
    """
    if value is None:
        return "[none]"
    if isinstance(value, str) and not value:
        return "[empty]"
    # str() 자릿수 제한에 걸리는 큰 정수는 크기만 표시
    if isinstance(value, int) and value.bit_length() > 1024:
        return f"[int {value.bit_length()} bits]"

    result = repr(value)

    # 길이 초과 시 절단
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
