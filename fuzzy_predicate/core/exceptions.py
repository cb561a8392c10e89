"""커스텀 예외 정의 (Structured Exception Hierarchy)

모든 예외는 predicate 생성 시점에만 발생한다. 매칭 자체는 어떤 입력에도
예외를 던지지 않는다.
"""
from typing import Any, Optional


# 기본 예외 클래스
class FuzzyPredicateException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
# TypeError도 상속: 잘못된 인자 타입에 대해 TypeError를 기대하는 호출부 호환
class ValidationException(FuzzyPredicateException, TypeError):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        self.field = field
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어 (문자열 또는 NaN이 아닌 숫자만 허용)"""
    def __init__(self, value: Any, details: Optional[dict[str, Any]] = None):
        reason = f"the query is required and must be a string or number (got {type(value).__name__})"
        super().__init__("query", reason, details)


class InvalidKeysException(ValidationException):
    """유효하지 않은 key 제한"""
    def __init__(self, value: Any, details: Optional[dict[str, Any]] = None):
        reason = (
            "keys should either be a sequence of strings or a single value as a string "
            f"(got {type(value).__name__})"
        )
        super().__init__("keys", reason, details)


class InvalidThresholdException(ValidationException):
    """유효하지 않은 threshold 타입 (범위는 검증하지 않음)"""
    def __init__(self, value: Any, details: Optional[dict[str, Any]] = None):
        reason = f"threshold must be a number or None (got {type(value).__name__})"
        super().__init__("threshold", reason, details)


class InvalidScorerException(ValidationException):
    """알 수 없는 scorer 이름 또는 호출 불가능한 scorer"""
    def __init__(self, value: Any, details: Optional[dict[str, Any]] = None):
        reason = f"scorer must be a callable or a known scorer name (got {value!r})"
        super().__init__("scorer", reason, details)
