"""Predicate Builder

검색어/keys/threshold를 검증하고, 후보 값 하나를 받아 bool을 돌려주는
재사용 가능한 predicate를 만듭니다.

사용 예::

    people = [{"name": "Foo Bar"}, {"name": "John Doe"}]
    [p for p in people if fuzzy("foo", "name")(p)]
    list(filter(fuzzy("jon doe", 0.8), ["John Doe", "Jane Smith"]))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Union

from fuzzy_predicate.core.logging import logger, sanitize_for_log
from fuzzy_predicate.engine.matcher import Scorer, search, is_threshold_active, normalize_query
from fuzzy_predicate.engine.options import FuzzyOptions
from fuzzy_predicate.utils.text.similarity import get_scorer

ScorerSpec = Optional[Union[str, Callable[[str, str], float]]]


@dataclass(frozen=True)
class FuzzyPredicate:
    """검증된 옵션에 묶인 predicate

    내부 상태를 바꾸지 않으므로 여러 번, 여러 스레드에서 호출해도 안전합니다.

    Attributes:
        options: 검증된 query / keys / threshold
        scorer: 유사도 모드에서 사용할 함수
    """

    options: FuzzyOptions
    scorer: Scorer
    needle: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "needle", normalize_query(self.options.query))

    def __call__(self, candidate: Any) -> bool:
        opts = self.options
        return search(candidate, opts.query, self.needle, opts.keys, opts.threshold, self.scorer, set())

    @property
    def similarity_mode(self) -> bool:
        return is_threshold_active(self.options.threshold)


def build_from_options(options: FuzzyOptions, scorer: ScorerSpec = None) -> FuzzyPredicate:
    """명시적인 옵션 구조로 predicate 생성

    Raises:
        InvalidScorerException: 알 수 없는 scorer
    """
    predicate = FuzzyPredicate(options=options, scorer=get_scorer(scorer))
    logger.debug(
        f"predicate built: query={sanitize_for_log(options.query)} "
        f"keys={sorted(options.keys)} threshold={sanitize_for_log(options.threshold)} "
        f"mode={'similarity' if predicate.similarity_mode else 'substring'}"
    )
    return predicate


def fuzzy(query: Any = None, keys: Any = None, threshold: Any = None, *, scorer: ScorerSpec = None) -> FuzzyPredicate:
    """퍼지 매칭 predicate 생성

    "퍼지 매치" 규칙:
    - 문자열: 대소문자/공백/문장부호를 무시하고 검색어를 포함하면 매치
    - 숫자: 정확히 같을 때만 매치 ("42" 검색어도 42와 매치)
    - 컨테이너: 값 중 하나라도 매치하면 매치 (keys로 대상 필드 제한 가능)
    - threshold 지정 시: 정규화된 문자열 간 유사도가 threshold 이상이면 매치

    Args:
        query: 검색어 (문자열 또는 NaN이 아닌 숫자)
        keys: 검색할 key (문자열 하나 또는 문자열 시퀀스).
            숫자를 넘기면 threshold로 취급합니다.
        threshold: 0~1 유사도 임계값. 0이면 부분 문자열 모드
        scorer: 유사도 함수 또는 scorer 이름 (기본값: 설정의 default_scorer)

    Returns:
        후보 값 하나를 받아 bool을 반환하는 predicate

    Raises:
        InvalidQueryException, InvalidKeysException,
        InvalidThresholdException, InvalidScorerException
    """
    return build_from_options(FuzzyOptions.from_call(query, keys, threshold), scorer=scorer)


build_predicate = fuzzy


def fuzzy_filter(
    values: Iterable[Any],
    query: Any,
    keys: Any = None,
    threshold: Any = None,
    *,
    scorer: ScorerSpec = None,
) -> List[Any]:
    """values 중 predicate에 매치하는 값만 순서대로 반환"""
    predicate = fuzzy(query, keys, threshold, scorer=scorer)
    return [value for value in values if predicate(value)]
