"""숫자/문자열 느슨한 비교 유틸리티

JavaScript의 `==` 처럼 숫자 후보와 문자열 검색어를 같은 숫자 표현으로
바꿔서 비교합니다. 암묵적 변환에 기대지 않고 규칙을 명시적으로 구현합니다.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

# ECMAScript StringNumericLiteral 중 10진수 부분 (Python 전용 표기 "1_000", "inf", "nan" 제외)
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_RES = {
    "0x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"[0-7]+"), 8),
    "0b": (re.compile(r"[01]+"), 2),
}

# JS Number는 절댓값 1e21 이상부터 지수 표기로 출력
_EXPONENT_FROM = 10 ** 21

# JS 문자열은 ASCII 공백 외에 NBSP, 줄 구분자, BOM 등도 trim 대상
_JS_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_number(value: Any) -> bool:
    """숫자 여부 (bool은 숫자로 보지 않음)"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _int_to_float(value: int) -> float:
    """float 범위를 넘는 정수는 부호에 맞는 무한대"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_number(text: str) -> float:
    """문자열을 숫자로 변환 (ECMAScript ToNumber 규칙)

    - 앞뒤 공백 제거 후 빈 문자열은 0
    - 0x / 0o / 0b 접두사 (부호 불가)
    - "Infinity", "+Infinity", "-Infinity"
    - 그 외 10진수 리터럴, 실패 시 NaN
    """
    s = text.strip(_JS_WHITESPACE)
    if not s:
        return 0.0

    prefix = s[:2].lower()
    if prefix in _RADIX_RES:
        digits_re, base = _RADIX_RES[prefix]
        if digits_re.fullmatch(s[2:]):
            return _int_to_float(int(s[2:], base))
        return math.nan

    if s in ("Infinity", "+Infinity"):
        return math.inf
    if s == "-Infinity":
        return -math.inf

    if _DECIMAL_RE.fullmatch(s):
        return float(s)

    return math.nan


def number_to_text(value: Any) -> str:
    """숫자를 JavaScript가 출력하는 형태의 문자열로 변환

    예시: 42 -> "42", 42.0 -> "42", 4.5 -> "4.5", inf -> "Infinity",
    1e21 -> "1e+21", 1.5e-7 -> "1.5e-7", 10**400 -> "Infinity"

    정수는 1e21 미만이면 그대로 출력하고, 그 이상은 JS Number와 같이
    float로 바꿔 지수 표기를 씁니다 (float 범위를 넘으면 Infinity).
    """
    if isinstance(value, int) and abs(value) < _EXPONENT_FROM:
        return str(value)

    number = _int_to_float(value) if isinstance(value, int) else value
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr는 값을 복원하는 가장 짧은 자릿수를 돌려줌 (JS와 동일한 자릿수)
    _, digits, exponent = Decimal(repr(abs(number))).as_tuple()
    point = len(digits) + exponent
    mantissa = "".join(map(str, digits)).rstrip("0")
    size = len(mantissa)

    if size <= point <= 21:
        text = mantissa + "0" * (point - size)
    elif 0 < point <= 21:
        text = mantissa[:point] + "." + mantissa[point:]
    elif -6 < point <= 0:
        text = "0." + "0" * -point + mantissa
    else:
        shift = point - 1
        text = mantissa[0]
        if size > 1:
            text += "." + mantissa[1:]
        text += "e" + ("+" if shift > 0 else "-") + str(abs(shift))
    return sign + text


def loosely_equal(number: Any, query: Any) -> bool:
    """숫자 후보와 검색어의 느슨한 동등 비교

    - 숫자 vs 숫자: 값 비교 (NaN은 어떤 값과도 같지 않음)
    - 숫자 vs 문자열: 문자열을 to_number로 바꿔 비교
    - 그 외 타입: False
    """
    if is_number(query):
        other = query
    elif isinstance(query, str):
        other = to_number(query)
    else:
        return False

    if is_nan(number) or is_nan(other):
        return False
    return number == other
