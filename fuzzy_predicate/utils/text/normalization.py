"""Text normalization used before every textual comparison."""

from __future__ import annotations

import re
from typing import Any

# 문자/숫자가 아닌 모든 문자 (공백, 하이픈, 문장부호, 괄호, 언더스코어 포함)
_NON_ALNUM_RE = re.compile(r"[\W_]+")


def normalize(value: Any) -> Any:
    """값을 비교용으로 정규화합니다.

    - 문자열: 소문자로 바꾸고 문자/숫자 이외의 문자를 모두 제거
    - 그 외: 변경 없이 그대로 반환

    예시:
    - "John Doe" -> "johndoe"
    - "DOE, JOHN" -> "doejohn"
    - "I-Would_eat!FOOD*42" -> "iwouldeatfood42"

    멱등성: normalize(normalize(s)) == normalize(s)
    """
    if isinstance(value, str):
        return _NON_ALNUM_RE.sub("", value.lower())

    return value
