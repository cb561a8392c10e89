"""Predicate 옵션 (query / keys / threshold)

오버로드된 호출 형태 `fuzzy(query, keys_or_threshold, threshold)`를
명시적인 구조로 풀어 둔 모델입니다.
"""

from __future__ import annotations

import math
from typing import Any, FrozenSet, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

from fuzzy_predicate.core.exceptions import (
    InvalidKeysException,
    InvalidQueryException,
    InvalidThresholdException,
)
from fuzzy_predicate.core.logging import logger, sanitize_for_log
from fuzzy_predicate.utils.coercion import is_nan, is_number

# keys로 허용하는 시퀀스 타입 (문자열 항목만)
_KEY_COLLECTIONS = (list, tuple, set, frozenset)


class FuzzyOptions(BaseModel):
    """검증이 끝난 predicate 옵션 (불변)"""

    model_config = ConfigDict(frozen=True)

    query: Union[StrictStr, StrictInt, StrictFloat] = Field(..., description="검색어 (문자열 또는 숫자)")
    keys: FrozenSet[StrictStr] = Field(default_factory=frozenset, description="검색 대상 key (비어 있으면 전체)")
    threshold: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="유사도 임계값 (범위 검증 없음)")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: Union[str, int, float]) -> Union[str, int, float]:
        """NaN 검색어 거절"""
        if isinstance(v, float) and math.isnan(v):
            raise ValueError("query must not be NaN")
        return v

    @classmethod
    def from_call(cls, query: Any, keys: Any = None, threshold: Any = None) -> "FuzzyOptions":
        """오버로드된 인자 형태를 해석해 옵션 생성

        keys 해석 규칙:
        - None: 제한 없음
        - 문자열: 해당 key 하나
        - 숫자: threshold로 재해석 (명시적 threshold보다 우선), 제한 없음
        - 문자열 시퀀스: 해당 key 집합

        Raises:
            InvalidQueryException: 문자열/숫자가 아니거나 NaN인 검색어
            InvalidKeysException: 위 규칙에 맞지 않는 keys
            InvalidThresholdException: 숫자가 아닌 threshold
        """
        if not (isinstance(query, str) or (is_number(query) and not is_nan(query))):
            logger.warning(f"Invalid query rejected: {sanitize_for_log(query)}")
            raise InvalidQueryException(query)

        if keys is None:
            restriction: FrozenSet[str] = frozenset()
        elif isinstance(keys, str):
            restriction = frozenset((keys,))
        elif is_number(keys) and not is_nan(keys):
            if threshold is not None:
                logger.debug(
                    f"positional threshold {sanitize_for_log(keys)} "
                    f"overrides threshold={sanitize_for_log(threshold)}"
                )
            threshold = keys
            restriction = frozenset()
        elif isinstance(keys, _KEY_COLLECTIONS) and all(isinstance(k, str) for k in keys):
            restriction = frozenset(keys)
        else:
            logger.warning(f"Invalid keys rejected: {sanitize_for_log(keys)}")
            raise InvalidKeysException(keys)

        if threshold is not None and not is_number(threshold):
            logger.warning(f"Invalid threshold rejected: {sanitize_for_log(threshold)}")
            raise InvalidThresholdException(threshold)

        return cls(query=query, keys=restriction, threshold=threshold)
