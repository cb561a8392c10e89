"""fuzzy_predicate - 퍼지 매칭 필터 predicate

값(문자열, 숫자, 중첩 컨테이너)이 검색어를 "퍼지하게" 포함하는지 판별하는
predicate를 만듭니다.
"""

from .core.exceptions import (
    FuzzyPredicateException,
    ValidationException,
    InvalidQueryException,
    InvalidKeysException,
    InvalidThresholdException,
    InvalidScorerException,
)
from .engine import (
    FuzzyOptions,
    FuzzyPredicate,
    build_from_options,
    build_predicate,
    fuzzy,
    fuzzy_filter,
    matches,
)
from .utils.text import get_scorer, normalize, similarity

__version__ = "1.0.0"

__all__ = [
    # builder
    "fuzzy",
    "build_predicate",
    "build_from_options",
    "fuzzy_filter",
    "FuzzyPredicate",
    "FuzzyOptions",
    # matcher
    "matches",
    # text
    "normalize",
    "similarity",
    "get_scorer",
    # errors
    "FuzzyPredicateException",
    "ValidationException",
    "InvalidQueryException",
    "InvalidKeysException",
    "InvalidThresholdException",
    "InvalidScorerException",
]
