"""텍스트/변환 유틸리티 유닛 테스트"""
import math

import pytest

from fuzzy_predicate.utils.coercion import is_number, loosely_equal, number_to_text, to_number
from fuzzy_predicate.utils.text.normalization import normalize


class TestNormalize:
    """정규화 테스트"""

    def test_lowercase_and_strip(self):
        """소문자 변환 + 문자/숫자 이외 제거"""
        assert normalize("John Doe") == "johndoe"
        assert normalize("DOE, JOHN") == "doejohn"
        assert normalize("JOHN_DOE") == "johndoe"
        assert normalize("I-Would_eat!FOOD*42/times+per{day}") == "iwouldeatfood42timesperday"

    def test_brackets_and_whitespace(self):
        """괄호, 탭, 줄바꿈 제거"""
        assert normalize("[a]\t(b)\n{c}") == "abc"

    def test_unicode_letters(self):
        """한글/악센트 문자는 유지"""
        assert normalize("맥북 에어 13") == "맥북에어13"
        assert normalize("Café") == "café"

    def test_empty(self):
        assert normalize("") == ""
        assert normalize("  -_- ") == ""

    @pytest.mark.parametrize("value", [42, 4.5, None, True, ["A B"], {"A": "B"}])
    def test_non_text_passthrough(self, value):
        """문자열이 아니면 그대로 반환"""
        assert normalize(value) is value

    @pytest.mark.parametrize("text", ["John Doe", "DOE, JOHN", "I-Would_eat!FOOD*42", "", "맥북 에어", "ALL CAPS!!"])
    def test_idempotent(self, text):
        """멱등성"""
        once = normalize(text)
        assert normalize(once) == once


class TestToNumber:
    """ECMAScript ToNumber 규칙"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("42", 42.0),
            (" 42 ", 42.0),
            ("\n42\t", 42.0),
            ("", 0.0),
            ("   ", 0.0),
            ("-4.5", -4.5),
            ("+4.5", 4.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("0x2A", 42.0),
            ("0X2a", 42.0),
            ("0o17", 15.0),
            ("0b101", 5.0),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
        ],
    )
    def test_valid(self, text, expected):
        assert to_number(text) == expected

    @pytest.mark.parametrize("text", ["abc", "4 2", "1_000", "inf", "nan", "0x", "-0x10", "0b2", "42px", "infinity"])
    def test_invalid_is_nan(self, text):
        assert math.isnan(to_number(text))

    def test_radix_overflow_is_infinity(self):
        """float 범위를 넘는 진법 리터럴은 Infinity"""
        assert to_number("0x" + "f" * 300) == math.inf


class TestNumberToText:
    """JS 숫자 출력 형식"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (42, "42"),
            (42.0, "42"),
            (-3.0, "-3"),
            (4.5, "4.5"),
            (0.1, "0.1"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (math.nan, "NaN"),
            (-0.0, "0"),
            (100.0, "100"),
            (1e20, "100000000000000000000"),
            (10 ** 21, "1e+21"),
            (1e21, "1e+21"),
            (-1.5e22, "-1.5e+22"),
            (1e-6, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (10 ** 5000, "Infinity"),
            (-(10 ** 5000), "-Infinity"),
        ],
        ids=lambda v: "huge-int" if isinstance(v, int) and v.bit_length() > 64 else None,
    )
    def test_render(self, value, expected):
        assert number_to_text(value) == expected


class TestLooselyEqual:
    """느슨한 동등 비교"""

    def test_number_number(self):
        assert loosely_equal(42, 42)
        assert loosely_equal(42, 42.0)
        assert not loosely_equal(42, 420)

    def test_number_text(self):
        assert loosely_equal(42, "42")
        assert loosely_equal(42, " 0x2A ")
        assert loosely_equal(0, "")
        assert not loosely_equal(4, "42")
        assert not loosely_equal(42, "4")

    def test_nan(self):
        assert not loosely_equal(math.nan, math.nan)
        assert not loosely_equal(math.nan, "NaN")
        assert not loosely_equal(0, "nan")

    def test_other_query_types(self):
        assert not loosely_equal(1, True)
        assert not loosely_equal(1, [1])
        assert not loosely_equal(0, None)

    def test_is_number(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")
        assert not is_number(1j)
