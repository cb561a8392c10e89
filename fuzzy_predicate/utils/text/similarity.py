"""Similarity helpers.

유사도 계산 자체는 rapidfuzz에 위임합니다. 여기서는 rapidfuzz의 0~100 점수를
0~1 비율로 바꾼 scorer 목록과 이름 조회만 제공합니다.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Union

from rapidfuzz import fuzz

from fuzzy_predicate.core.config import settings
from fuzzy_predicate.core.exceptions import InvalidScorerException

Scorer = Callable[[str, str], float]


def _scaled(func: Callable[..., float]) -> Scorer:
    def scorer(a: str, b: str) -> float:
        return float(func(a, b)) / 100.0

    scorer.__name__ = getattr(func, "__name__", "scorer")
    scorer.__doc__ = f"rapidfuzz.fuzz.{scorer.__name__} scaled to [0, 1]"
    return scorer


SCORERS: Dict[str, Scorer] = {
    "ratio": _scaled(fuzz.ratio),
    "partial_ratio": _scaled(fuzz.partial_ratio),
    "token_sort_ratio": _scaled(fuzz.token_sort_ratio),
    "token_set_ratio": _scaled(fuzz.token_set_ratio),
    "wratio": _scaled(fuzz.WRatio),
}


def get_scorer(scorer: Optional[Union[str, Scorer]] = None) -> Scorer:
    """scorer 이름(또는 callable)을 실제 scorer 함수로 변환

    Args:
        scorer: None이면 설정의 기본 scorer, 문자열이면 SCORERS에서 조회,
            callable이면 그대로 사용

    Raises:
        InvalidScorerException: 알 수 없는 이름이거나 호출 불가능한 값
    """
    if scorer is None:
        scorer = settings.default_scorer

    if isinstance(scorer, str):
        found = SCORERS.get(scorer.strip().lower())
        if found is None:
            raise InvalidScorerException(scorer)
        return found

    if callable(scorer):
        return scorer

    raise InvalidScorerException(scorer)


def similarity(text1: str, text2: str) -> float:
    """두 문자열의 유사도 (0~1, 기본 scorer 사용)

    정규화는 호출부 책임입니다.
    """
    return get_scorer()(text1, text2)
