"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 fixture (predicate 적용 헬퍼, 결정적 scorer)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Iterable

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# fuzzy_predicate import (settings 생성) 전에 적용되어야 함
os.environ["ENVIRONMENT"] = "test"
os.environ["FUZZY_LOG_LEVEL"] = "INFO"


@pytest.fixture
def apply_filter() -> Callable[[Iterable[Any], Callable[[Any], bool]], list]:
    """Array.filter와 같은 방식으로 predicate 적용"""

    def _apply(values: Iterable[Any], predicate: Callable[[Any], bool]) -> list:
        return [value for value in values if predicate(value)]

    return _apply


class RecordingScorer:
    """호출 인자를 기록하는 결정적 scorer (동일하면 1.0, 아니면 0.0)"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, a: str, b: str) -> float:
        self.calls.append((a, b))
        return 1.0 if a == b else 0.0


@pytest.fixture
def recording_scorer() -> RecordingScorer:
    return RecordingScorer()
