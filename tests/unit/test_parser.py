"""
Тесты TextParser

Проверяет:
1. Приоритет грамматик (nan → inf → 0b → 0x → дробь → десятичная)
2. Битовые шаблоны с дополнением нулями слева
3. Дроби с нулевым числителем/знаменателем
4. Десятичную запись: нули, точка, показатель степени (1-5 цифр)
5. Ошибки разбора → NaN (без исключений)
"""

import pytest

from floatcodec.core.domain import FloatValue, format_params
from floatcodec.core.math import ONE, Rational, times_power_of_ten, times_power_of_two
from floatcodec.text.parser import parse, parse_bin, parse_decimal, parse_fraction, parse_hex


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def f16():
    return format_params(16)


@pytest.fixture
def f32():
    return format_params(32)


@pytest.fixture
def f64():
    return format_params(64)


def assert_finite(value: FloatValue, expected: Rational) -> None:
    assert value.is_finite
    assert value.signed_value() == expected


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗАПИСИ
# =============================================================================


class TestSpecialLiterals:
    """nan и inf"""

    @pytest.mark.parametrize("text", ["nan", "NaN", "NAN", "  nan\t"])
    def test_nan(self, f64, text: str) -> None:
        """nan без учёта регистра"""
        assert parse(text, f64).is_nan

    @pytest.mark.parametrize(
        "text,negative",
        [("inf", False), ("Inf", False), ("+INF", False), ("-inf", True), (" -Inf ", True)],
    )
    def test_infinity(self, f64, text: str, negative: bool) -> None:
        """[+-]inf без учёта регистра"""
        value = parse(text, f64)
        assert value.is_inf
        assert value.sign == negative

    def test_signed_nan_rejected(self, f64) -> None:
        """Знак перед nan не допускается"""
        assert parse("-nan", f64).is_nan
        assert parse("-nan", f64).sign is False


# =============================================================================
# БИТОВЫЕ ШАБЛОНЫ
# =============================================================================


class TestBitPatterns:
    """0b и 0x"""

    def test_binary_full_width(self, f16) -> None:
        """0b + 16 бит = 1.0"""
        value = parse("0b0011110000000000", f16)
        assert_finite(value, ONE)
        assert value.is_encoded
        assert value.exponent == 0

    def test_binary_left_padded(self, f16) -> None:
        """Короткая запись дополняется нулями слева"""
        value = parse("0b1", f16)
        assert_finite(value, times_power_of_two(1, -24))
        assert value.mantissa_bits == (0,) * 9 + (1,)

    def test_binary_prefix_case_insensitive(self, f16) -> None:
        """Префикс 0B"""
        assert_finite(parse("0B0011110000000000", f16), ONE)

    @pytest.mark.parametrize("digits", ["", "102", "1" * 17, "01 1"])
    def test_binary_invalid(self, f16, digits: str) -> None:
        """Неверные символы или длина → NaN"""
        assert parse("0b" + digits, f16).is_nan

    def test_binary_sign_bit(self, f16) -> None:
        """Старший бит — знак"""
        value = parse("0b1000000000000000", f16)
        assert value.is_zero and value.sign

    def test_hex_32bit(self, f32) -> None:
        """0x3F800000 = 1.0"""
        assert_finite(parse("0x3F800000", f32), ONE)

    def test_hex_lowercase_and_short(self, f16) -> None:
        """Нижний регистр и дополнение нулями"""
        assert_finite(parse("0x3c00", f16), ONE)
        assert_finite(parse("0X1", f16), times_power_of_two(1, -24))

    def test_hex_special_values(self, f16) -> None:
        """Inf и NaN из шаблона"""
        assert parse("0x7C00", f16).is_inf
        negative = parse("0xFC00", f16)
        assert negative.is_inf and negative.sign
        assert parse("0x7E00", f16).is_nan

    @pytest.mark.parametrize("digits", ["", "12345", "3G00"])
    def test_hex_invalid(self, f16, digits: str) -> None:
        """Лишние цифры или не-hex символы → NaN"""
        assert parse("0x" + digits, f16).is_nan

    def test_direct_helpers(self, f64) -> None:
        """parse_bin/parse_hex без префикса"""
        assert parse_hex("3FF0000000000000", f64).magnitude == ONE
        assert parse_bin("0" * 64, f64).is_zero

    def test_width_is_per_call(self) -> None:
        """Одна запись в разных форматах разбирается независимо"""
        assert_finite(parse("0x3C00", format_params(16)), ONE)
        assert_finite(parse("0x3C00", format_params(32)), times_power_of_two(15, -139))


# =============================================================================
# ДРОБИ
# =============================================================================


class TestFractions:
    """[+-]целое/целое"""

    def test_simple(self, f64) -> None:
        """6/4 = 3/2"""
        assert_finite(parse("6/4", f64), Rational(3, 2))

    def test_negative(self, f64) -> None:
        """-1/3"""
        assert_finite(parse("-1/3", f64), Rational(-1, 3))

    def test_division_by_zero(self, f64) -> None:
        """1/0 → Inf, -1/0 → -Inf, 0/0 → NaN"""
        assert parse("1/0", f64).is_inf and not parse("1/0", f64).sign
        negative = parse("-1/0", f64)
        assert negative.is_inf and negative.sign
        assert parse("0/0", f64).is_nan

    def test_signed_zero(self, f64) -> None:
        """Нулевой числитель → знаковый ноль"""
        value = parse("-0/5", f64)
        assert value.is_zero and value.sign
        assert not parse("0/5", f64).sign

    def test_whitespace_inside_rejected(self) -> None:
        """Пробелы внутри дроби не допускаются"""
        assert parse_fraction("1 / 3").is_nan


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


class TestDecimal:
    """[+-](цифры[.цифры] | .цифры)[E[+-]цифры]"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0", Rational(1)),
            ("0.1", Rational(1, 10)),
            ("-2.50E+1", Rational(-25)),
            (".5", Rational(1, 2)),
            ("5.", Rational(5)),
            ("007", Rational(7)),
            ("1e-3", Rational(1, 1000)),
            ("+.5e1", Rational(5)),
            ("123.456", Rational(123456, 1000)),
            ("0.000100", Rational(1, 10000)),
            ("12E99999", Rational(12 * 10**99999)),
            ("100", Rational(100)),
        ],
    )
    def test_exact_values(self, f64, text: str, expected: Rational) -> None:
        """Точное значение целое * 10^exp"""
        assert_finite(parse(text, f64), expected)

    @pytest.mark.parametrize(
        "text,negative",
        [
            ("0", False),
            ("-0.0", True),
            ("+0.", False),
            (".000", False),
            ("0E999999", False),
            ("-00", True),
            ("-00.000", True),
            ("0.0e-5", False),
        ],
    )
    def test_zero_forms(self, f64, text: str, negative: bool) -> None:
        """Все способы записать ноль"""
        value = parse(text, f64)
        assert value.is_zero
        assert value.sign == negative

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "1.2.3", "1e", "1E123456", "--1", "1,5", "e5", ".", "+", "1e+-5", "0x", "١٢"],
    )
    def test_invalid_is_nan(self, f64, text: str) -> None:
        """Нераспознанная запись → NaN"""
        assert parse(text, f64).is_nan

    def test_not_encoded(self, f64) -> None:
        """Десятичная запись даёт только модуль"""
        assert not parse("0.1", f64).is_encoded

    def test_parse_decimal_direct(self) -> None:
        """parse_decimal не зависит от формата"""
        assert parse_decimal("2.5").magnitude == Rational(5, 2)
        assert parse_decimal("1/2").is_nan


class TestLongLiterals:
    """Записи длиннее предела int <- str (4300 цифр)"""

    def test_many_leading_fraction_zeros(self, f64) -> None:
        """Нули после точки уходят в показатель степени"""
        value = parse("0." + "0" * 5000 + "1", f64)
        assert value.magnitude == times_power_of_ten(1, -5001)

    def test_many_trailing_integer_zeros(self, f64) -> None:
        """Хвостовые нули целой части уходят в показатель степени"""
        assert parse("3" + "0" * 5000, f64).magnitude == times_power_of_ten(3, 5000)

    def test_many_significant_digits(self, f64) -> None:
        """Длинная значащая часть переводится по кускам"""
        value = parse("-" + "1" * 9000, f64)
        assert value.sign
        assert value.magnitude == Rational((10**9000 - 1) // 9)

    def test_long_fraction_significand(self, f64) -> None:
        """Длинная дробная часть с точкой в середине"""
        text = "7" * 4500 + "." + "25" * 2500
        integer_part = (10**4500 - 1) // 9 * 7
        expected = Rational(integer_part * 10**5000 + (10**5000 - 1) // 99 * 25, 10**5000)
        assert parse(text, f64).magnitude == expected

    def test_long_fraction_literal(self, f64) -> None:
        """Числитель дроби длиннее 4300 цифр"""
        value = parse("2" + "0" * 5000 + "/4", f64)
        assert value.magnitude == times_power_of_ten(5, 4999)

    def test_long_zero(self, f64) -> None:
        """Длинная запись нуля"""
        value = parse("-" + "0" * 6000 + "." + "0" * 6000, f64)
        assert value.is_zero and value.sign


# =============================================================================
# ПРИОРИТЕТ ГРАММАТИК
# =============================================================================


class TestGrammarPriority:
    """Первая совпавшая грамматика побеждает"""

    def test_fraction_before_decimal(self, f64) -> None:
        """1/3 — дробь"""
        assert_finite(parse("1/3", f64), Rational(1, 3))

    def test_binary_prefix_wins_over_decimal(self, f64) -> None:
        """0b10 — битовый шаблон, а не десятичное число"""
        value = parse("0b10", f64)
        assert value.is_encoded
        assert value.magnitude == times_power_of_two(1, -1073)

    def test_failed_hex_does_not_fall_through(self, f64) -> None:
        """0x с неверными цифрами → NaN без попытки других грамматик"""
        assert parse("0x1.5", f64).is_nan
