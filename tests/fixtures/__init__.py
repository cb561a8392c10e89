"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진 의존 없음
"""

from .haystacks import (
    FOO_BAR,
    FOO_KEY,
    FOO_VALUE,
    JOHN_DOE,
    MIXED,
    NAMES,
    NESTED_LIST,
    NOISY,
    NUMBERS,
    RECORDS,
)

__all__ = [
    "FOO_BAR",
    "FOO_KEY",
    "FOO_VALUE",
    "JOHN_DOE",
    "MIXED",
    "NAMES",
    "NESTED_LIST",
    "NOISY",
    "NUMBERS",
    "RECORDS",
]
