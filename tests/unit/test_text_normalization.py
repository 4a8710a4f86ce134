"""텍스트 정규화 유닛 테스트"""
import pytest

from catalog_matcher.utils.text import (
    looks_like_code,
    normalize_code,
    normalize_header,
    tokenize,
)


HEADER_SAMPLES = [
    "Кабель ВВГнг 3x2.5",
    "Кабель ВВГнг 3х2,5",
    "Провод ПуГВ 6 мм²",
    "Сечение 2,5 кв. мм",
    "кв,мм",
    "КВ.#ММ²",
    "квмм / mm2 / MM²",
    "Провод кв кв,мм",
    "кв. кв. кв мм²",
    "кв кв.,мм2",
    "Лампа «Ёлка» \"новая\"",
    "Автомат (16А) #5!",
    "  много    пробелов\tи\nпереносов  ",
    "2×1.5 2*1.5 2x1.5 2х1.5",
    "",
    "A-B/C.D_E",
]

CODE_SAMPLES = [
    " elc 0100-2038/02 ",
    "3х2,5",
    "A_B.C",
    "ВА47-29 3P",
    "mva20*3",
    "",
]


class TestNormalizeHeader:
    """header 정규화 테스트"""

    def test_uppercase_and_multiplication_sign(self):
        """대문자화 + 곱셈 기호 통일"""
        assert normalize_header("Кабель ВВГнг 3x2.5") == "КАБЕЛЬ ВВГНГ 3X2.5"
        assert normalize_header("Кабель ВВГнг 3х2.5") == "КАБЕЛЬ ВВГНГ 3X2.5"

    def test_multiplication_variants_fold_to_x(self):
        """×, x, х, * 모두 X 로"""
        assert normalize_header("2×1.5 2*1.5 2x1.5 2х1.5") == "2X1.5 2X1.5 2X1.5 2X1.5"

    def test_decimal_comma_becomes_space(self):
        """쉼표는 허용 문자가 아니므로 공백"""
        assert normalize_header("Кабель ВВГнг 3х2,5") == "КАБЕЛЬ ВВГНГ 3X2 5"

    def test_area_units_fold_to_mm2(self):
        """면적 단위 표기 통일"""
        assert normalize_header("Провод ПуГВ 6 мм²") == "ПРОВОД ПУГВ 6 MM2"
        assert normalize_header("Сечение 2,5 кв. мм") == "СЕЧЕНИЕ 2 5 MM2"
        assert normalize_header("6 кв мм") == "6 MM2"
        assert normalize_header("6 квмм") == "6 MM2"
        assert normalize_header("6 mm2") == "6 MM2"
        assert normalize_header("6 mm²") == "6 MM2"

    def test_repeated_area_prefix(self):
        """연달아 붙은 "кв" 는 단위 하나로 접힘"""
        assert normalize_header("Провод кв кв,мм") == "ПРОВОД MM2"
        assert normalize_header("кв. кв. кв мм²") == "MM2"
        assert normalize_header("ПРОВОД КВ MM2") == "ПРОВОД MM2"

    def test_yo_folds_to_ye(self):
        """Ё → Е, 따옴표/꺾쇠 제거"""
        assert normalize_header("Лампа «Ёлка»") == "ЛАМПА ЕЛКА"

    def test_drop_disallowed_characters(self):
        """허용 문자 외 제거"""
        assert normalize_header("Автомат (16А) #5!") == "АВТОМАТ 16А 5"

    def test_keep_hyphen_slash_period(self):
        """하이픈, 슬래시, 마침표는 유지"""
        assert normalize_header("a-b/c.d") == "A-B/C.D"

    def test_collapse_whitespace(self):
        """다중 공백 정규화"""
        assert normalize_header("  много    пробелов\tи\nпереносов  ") == "МНОГО ПРОБЕЛОВ И ПЕРЕНОСОВ"

    def test_empty_string(self):
        """빈 문자열 처리"""
        assert normalize_header("") == ""
        assert normalize_header("   ") == ""

    @pytest.mark.parametrize("sample", HEADER_SAMPLES)
    def test_idempotent(self, sample):
        """멱등성: f(f(s)) == f(s)"""
        once = normalize_header(sample)
        assert normalize_header(once) == once


class TestNormalizeCode:
    """코드 정규화 테스트"""

    def test_remove_whitespace(self):
        """공백 제거 + 대문자화"""
        assert normalize_code(" elc 0100-2038/02 ") == "ELC0100-2038/02"

    def test_multiplication_sign(self):
        """곱셈 기호 통일, 쉼표 제거"""
        assert normalize_code("3х2,5") == "3X25"
        assert normalize_code("mva20*3") == "MVA20X3"

    def test_keep_underscore_drop_period(self):
        """언더스코어 유지, 마침표 제거"""
        assert normalize_code("A_B.C") == "A_BC"

    def test_empty_string(self):
        assert normalize_code("") == ""

    @pytest.mark.parametrize("sample", CODE_SAMPLES)
    def test_idempotent(self, sample):
        """멱등성: f(f(s)) == f(s)"""
        once = normalize_code(sample)
        assert normalize_code(once) == once


class TestTokenize:
    """토큰화 테스트"""

    def test_drop_short_tokens(self):
        """2글자 미만 토큰 제거"""
        assert tokenize("Кабель ВВГнг 3 x 2.5") == ["КАБЕЛЬ", "ВВГНГ", "2.5"]

    def test_preserve_order_and_duplicates(self):
        """등장 순서와 중복 유지"""
        assert tokenize("ab cd ab") == ["AB", "CD", "AB"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("a b c") == []


class TestLooksLikeCode:
    """코드 판별 테스트"""

    @pytest.mark.parametrize(
        "value",
        ["ELC0100203802", "MVA20-3-016-C", "ВА47-29 3P", "ab1", " A1/B2 "],
    )
    def test_code_like(self, value):
        assert looks_like_code(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "ABC",  # 숫자 없음
            "12345",  # 문자 없음
            "АБВ123",  # 영문자 없음
            "A1",  # 너무 짧음
            " A1 ",  # trim 후 너무 짧음
            "A1!",  # 허용 안 되는 문자
            "Кабель 3x2,5",  # 쉼표
        ],
    )
    def test_not_code_like(self, value):
        assert looks_like_code(value) is False
