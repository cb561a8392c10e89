"""Matcher - 후보 값의 런타임 타입에 따라 재귀적으로 검색

후보 종류별 규칙:
- NUMBER: 검색어와 느슨한 동등 비교 (42 == "42")
- TEXT: 정규화 후 부분 문자열 포함 여부, threshold가 있으면 유사도 비교
- COMPOSITE: 각 항목(key 제한 적용)을 재귀 검색, 첫 매치에서 중단
- UNSUPPORTED: 항상 False

매칭은 어떤 후보 값에 대해서도 예외를 던지지 않습니다.
"""

from __future__ import annotations

from enum import Enum
from typing import AbstractSet, Any, Callable, Optional, Set, Union

from fuzzy_predicate.core.logging import logger
from fuzzy_predicate.utils.coercion import is_nan, is_number, loosely_equal, number_to_text
from fuzzy_predicate.utils.text.normalization import normalize
from fuzzy_predicate.utils.text.similarity import get_scorer
from fuzzy_predicate.utils.traversal import is_composite, iter_entries

Query = Union[str, int, float]
Scorer = Callable[[str, str], float]


class CandidateKind(str, Enum):
    """후보 값의 종류"""

    NUMBER = "number"
    TEXT = "text"
    COMPOSITE = "composite"
    UNSUPPORTED = "unsupported"


def classify(candidate: Any) -> CandidateKind:
    """후보 값의 종류 판별 (bool은 숫자가 아님)"""
    if is_number(candidate):
        return CandidateKind.NUMBER
    if isinstance(candidate, str):
        return CandidateKind.TEXT
    if is_composite(candidate):
        return CandidateKind.COMPOSITE
    return CandidateKind.UNSUPPORTED


def is_threshold_active(threshold: Any) -> bool:
    """유사도 모드 여부

    None, 0, NaN은 "설정 안 됨"으로 취급합니다 (부분 문자열 모드).
    """
    if threshold is None or is_nan(threshold):
        return False
    return bool(threshold)


def normalize_query(query: Query) -> str:
    """검색어를 텍스트 비교용 문자열로 변환

    문자열은 정규화하고, 숫자는 정규화 없이 JS 출력 형태 그대로 사용합니다
    (4.5 -> "4.5", -4 -> "-4").
    """
    if is_number(query):
        return number_to_text(query)
    return normalize(query)


def matches(
    candidate: Any,
    query: Query,
    keys: AbstractSet[str] = frozenset(),
    threshold: Optional[float] = None,
    scorer: Optional[Scorer] = None,
) -> bool:
    """후보 값이 검색어를 "퍼지하게" 포함하는지 검사

    Args:
        candidate: 검사할 값 (읽기만 함)
        query: 검색어 (문자열 또는 숫자)
        keys: 컨테이너 검색 시 허용할 key 집합 (비어 있으면 전체)
        threshold: 유사도 임계값 (0~1), 없으면 부분 문자열 모드
        scorer: 유사도 함수, 없으면 설정의 기본 scorer

    Returns:
        매치 여부
    """
    if is_threshold_active(threshold) and scorer is None:
        scorer = get_scorer()
    return search(candidate, query, normalize_query(query), keys, threshold, scorer, set())


def search(
    candidate: Any,
    query: Query,
    needle: str,
    keys: AbstractSet[str],
    threshold: Optional[float],
    scorer: Optional[Scorer],
    path: Set[int],
) -> bool:
    """needle(정규화된 검색어)을 미리 계산해 둔 저수준 검색. path는 순환 참조 감지용"""
    kind = classify(candidate)

    if kind is CandidateKind.NUMBER:
        return loosely_equal(candidate, query)

    if kind is CandidateKind.TEXT:
        haystack = normalize(candidate)
        if is_threshold_active(threshold):
            return scorer(haystack, needle) >= threshold
        return needle in haystack

    if kind is CandidateKind.COMPOSITE:
        marker = id(candidate)
        if marker in path:
            logger.debug(f"cyclic reference skipped: {type(candidate).__name__} id={marker}")
            return False

        path.add(marker)
        try:
            for key, value in iter_entries(candidate):
                if keys and not _key_selected(key, keys):
                    continue
                if search(value, query, needle, keys, threshold, scorer, path):
                    return True
        finally:
            path.discard(marker)
        return False

    return False


def _key_selected(key: Any, keys: AbstractSet[str]) -> bool:
    # 시퀀스 인덱스 등 문자열이 아닌 key는 str() 형태로 비교
    return (key if isinstance(key, str) else str(key)) in keys
