"""Composite traversal helpers.

Mapping, named tuple, dataclass, pydantic 모델, 일반 시퀀스를 모두
"(key, value) 쌍의 순서 있는 나열"로 바라보게 해 줍니다.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any, Iterator, Tuple

from pydantic import BaseModel


def is_composite(value: Any) -> bool:
    """하위 값을 가진 컨테이너인지 여부 (문자열/바이트는 제외)"""
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    if isinstance(value, (Mapping, Sequence, BaseModel)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def iter_entries(value: Any) -> Iterator[Tuple[Any, Any]]:
    """컨테이너의 (key, value) 쌍을 순서대로 반환

    - Mapping: 원래 key
    - named tuple / dataclass / pydantic 모델: 필드 이름
    - 그 외 시퀀스: 0부터 시작하는 인덱스

    값은 복사하지 않고 원본 객체를 그대로 넘깁니다.
    """
    if isinstance(value, Mapping):
        yield from value.items()
    elif isinstance(value, BaseModel):
        for name in type(value).model_fields:
            yield name, getattr(value, name)
    elif dataclasses.is_dataclass(value):
        for field in dataclasses.fields(value):
            yield field.name, getattr(value, field.name)
    elif isinstance(value, tuple) and hasattr(value, "_fields"):
        yield from zip(value._fields, value)
    elif isinstance(value, Sequence):
        yield from enumerate(value)
