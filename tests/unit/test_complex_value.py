"""
Тесты для Complex (value object)

Проверяет:
1. Фабрики (of_cartesian, of_polar, of_cis, from_complex) и константы
2. Классификацию is_nan / is_infinite / is_finite
3. Равенство по битам (-0.0 != 0.0, NaN == NaN) и согласованный hash
4. Текстовый формат и parse с сообщениями об ошибках
5. Pydantic: валидацию, immutability, mapping форму
"""

import logging
import math

import pytest
from pydantic import ValidationError

from complexmath import I, NAN, ONE, ZERO, Complex, ComplexFormatError
from complexmath.core.math.bits import MAX_VALUE

# =============================================================================
# ФАБРИКИ И КОНСТАНТЫ
# =============================================================================


class TestFactories:
    """Тесты для фабрик Complex"""

    def test_constants(self) -> None:
        assert ZERO == Complex.of_cartesian(0.0, 0.0)
        assert ONE == Complex.of_cartesian(1.0, 0.0)
        assert I == Complex.of_cartesian(0.0, 1.0)
        assert NAN == Complex.of_cartesian(math.nan, math.nan)

    def test_of_cartesian_converts_ints(self) -> None:
        z = Complex.of_cartesian(1, -2)
        assert isinstance(z.real, float)
        assert z.imaginary == -2.0

    def test_of_polar(self) -> None:
        assert Complex.of_polar(2.0, 0.0) == Complex.of_cartesian(2.0, 0.0)
        z = Complex.of_polar(1.0, math.pi / 2)
        assert z.real == pytest.approx(0.0, abs=1e-16)
        assert z.imaginary == 1.0

    @pytest.mark.parametrize(
        "rho, theta",
        [
            (-1.0, 0.0),
            (-0.0, 0.0),
            (math.nan, 0.0),
            (1.0, math.inf),
            (1.0, math.nan),
        ],
    )
    def test_of_polar_invalid_is_nan(self, rho: float, theta: float) -> None:
        """Отрицательный/NaN rho или неконечный theta → NAN"""
        assert Complex.of_polar(rho, theta) == NAN

    def test_of_polar_infinite_rho(self) -> None:
        assert Complex.of_polar(math.inf, 0.0).real == math.inf

    def test_of_cis(self) -> None:
        assert Complex.of_cis(0.0) == ONE
        assert Complex.of_cis(math.inf) == NAN

    def test_builtin_complex_conversion(self) -> None:
        assert Complex.from_complex(1 + 2j) == Complex.of_cartesian(1.0, 2.0)
        assert complex(Complex.of_cartesian(3.0, -4.0)) == 3 - 4j


# =============================================================================
# КЛАССИФИКАЦИЯ И СВОЙСТВА
# =============================================================================


class TestClassification:
    """Тесты для is_nan / is_infinite / is_finite"""

    @pytest.mark.parametrize(
        "real, imaginary, is_nan, is_infinite, is_finite",
        [
            (1.0, 2.0, False, False, True),
            (math.nan, 0.0, True, False, False),
            (0.0, math.nan, True, False, False),
            (math.inf, 0.0, False, True, False),
            (math.nan, math.inf, False, True, False),
            (-math.inf, math.nan, False, True, False),
        ],
    )
    def test_classification(
        self,
        real: float,
        imaginary: float,
        is_nan: bool,
        is_infinite: bool,
        is_finite: bool,
    ) -> None:
        """Бесконечная часть важнее NaN"""
        z = Complex.of_cartesian(real, imaginary)
        assert z.is_nan is is_nan
        assert z.is_infinite is is_infinite
        assert z.is_finite is is_finite


class TestMagnitude:
    """Тесты для abs / arg / norm"""

    def test_abs(self) -> None:
        assert Complex.of_cartesian(3.0, 4.0).abs() == 5.0
        assert abs(Complex.of_cartesian(-3.0, -4.0)) == 5.0

    def test_abs_without_overflow(self) -> None:
        assert Complex.of_cartesian(MAX_VALUE, 0.0).abs() == MAX_VALUE
        assert math.isfinite(Complex.of_cartesian(MAX_VALUE / 2, MAX_VALUE / 2).abs())
        assert Complex.of_cartesian(MAX_VALUE, MAX_VALUE).abs() == math.inf

    def test_abs_of_infinite_with_nan(self) -> None:
        assert Complex.of_cartesian(math.nan, math.inf).abs() == math.inf

    @pytest.mark.parametrize("x, y", [(1e-320, 7e-321), (2.5, 1e-200), (0.3, 0.4)])
    def test_abs_symmetry(self, x: float, y: float) -> None:
        """|z| не зависит от знаков и порядка частей"""
        expected = Complex.of_cartesian(x, y).abs()
        assert Complex.of_cartesian(y, x).abs() == expected
        assert Complex.of_cartesian(-x, y).abs() == expected
        assert Complex.of_cartesian(x, -y).abs() == expected

    def test_arg(self) -> None:
        assert I.arg() == math.pi / 2
        assert Complex.of_cartesian(-1.0, 0.0).arg() == math.pi
        assert Complex.of_cartesian(-1.0, -0.0).arg() == -math.pi

    def test_norm(self) -> None:
        assert Complex.of_cartesian(3.0, 4.0).norm() == 25.0
        assert Complex.of_cartesian(math.inf, math.nan).norm() == math.inf
        assert math.isnan(NAN.norm())


class TestSimpleTransforms:
    """Тесты для conj / negate / proj"""

    def test_conj(self) -> None:
        z = Complex.of_cartesian(1.0, 2.0)
        assert z.conj() == Complex.of_cartesian(1.0, -2.0)
        assert z.conj().conj() == z

    def test_negate(self) -> None:
        assert -Complex.of_cartesian(1.0, -0.0) == Complex.of_cartesian(-1.0, 0.0)

    def test_proj(self) -> None:
        z = Complex.of_cartesian(1.0, 2.0)
        assert z.proj() == z
        assert Complex.of_cartesian(math.inf, -1.0).proj() == Complex.of_cartesian(math.inf, -0.0)
        assert Complex.of_cartesian(math.nan, -math.inf).proj() == Complex.of_cartesian(
            math.inf, -0.0
        )


# =============================================================================
# РАВЕНСТВО И HASH
# =============================================================================


class TestEquality:
    """Тесты для __eq__ / __hash__"""

    def test_signed_zero_distinguished(self) -> None:
        assert Complex.of_cartesian(0.0, 0.0) != Complex.of_cartesian(-0.0, 0.0)
        assert Complex.of_cartesian(0.0, 0.0) != Complex.of_cartesian(0.0, -0.0)

    def test_nan_equals_nan(self) -> None:
        """Любой NaN канонизируется"""
        assert NAN == NAN
        assert Complex.of_cartesian(math.nan, 1.0) == Complex.of_cartesian(-math.nan, 1.0)
        assert hash(Complex.of_cartesian(math.nan, 1.0)) == hash(
            Complex.of_cartesian(-math.nan, 1.0)
        )

    def test_hash_consistent(self) -> None:
        values = {Complex.of_cartesian(1, 2), Complex.of_cartesian(1.0, 2.0), ZERO, ONE}
        assert len(values) == 3

    def test_validated_and_constructed_equal(self) -> None:
        assert Complex(real=1.0, imaginary=2.0) == Complex.of_cartesian(1.0, 2.0)

    def test_not_equal_to_other_types(self) -> None:
        assert Complex.of_cartesian(1.0, 0.0) != 1.0
        assert Complex.of_cartesian(1.0, 0.0) != (1.0, 0.0)


# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================


class TestTextFormat:
    """Тесты для to_string / parse"""

    def test_to_string(self) -> None:
        assert str(Complex.of_cartesian(1.5, -0.0)) == "(1.5,-0.0)"
        assert Complex.of_cartesian(math.inf, -math.inf).to_string() == "(inf,-inf)"
        assert str(NAN) == "(nan,nan)"

    @pytest.mark.parametrize(
        "z",
        [
            Complex.of_cartesian(1.5, -0.0),
            Complex.of_cartesian(-0.0, 0.0),
            Complex.of_cartesian(0.1, 1e-300),
            Complex.of_cartesian(5e-324, -MAX_VALUE),
            Complex.of_cartesian(math.inf, math.nan),
            NAN,
        ],
    )
    def test_round_trip(self, z: Complex) -> None:
        """parse(str(z)) == z бит-в-бит"""
        assert Complex.parse(str(z)) == z

    def test_parse_allows_whitespace_around_numbers(self) -> None:
        assert Complex.parse("( 1 , 2 )") == Complex.of_cartesian(1.0, 2.0)

    def test_parse_accepts_exponent_notation(self) -> None:
        assert Complex.parse("(1e3,-2.5E-1)") == Complex.of_cartesian(1000.0, -0.25)

    @pytest.mark.parametrize(
        "text, reason, part",
        [
            ("(1)", "Input too short, expected format", "(x,y)"),
            ("[1,2)", "Expected start delimiter", "("),
            ("(1,2]", "Expected end delimiter", ")"),
            ("(12345)", "Expected separator between two numbers", ","),
            ("(,123)", "Expected separator between two numbers", ","),
            ("(1,2,)", "Incorrect number of parts, expected only 2 using separator", ","),
            ("(1,2,3)", "Could not parse real part", "1,2"),
            ("(a,2)", "Could not parse real part", "a"),
            ("(1,b)", "Could not parse imaginary part", "b"),
        ],
    )
    def test_parse_errors(self, text: str, reason: str, part: str) -> None:
        """Каждая ошибка формата называет причину и фрагмент"""
        with pytest.raises(ComplexFormatError) as exc_info:
            Complex.parse(text)
        err = exc_info.value
        assert err.reason == reason
        assert err.part == part
        assert err.text == text
        assert str(err) == f"{reason} '{part}' for input \"{text}\""

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Complex.parse("oops")

    def test_parse_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="complexmath")
        with pytest.raises(ComplexFormatError):
            Complex.parse("[1,2)")
        assert "rejected" in caplog.text


# =============================================================================
# PYDANTIC
# =============================================================================


class TestPydanticModel:
    """Тесты для Pydantic валидации и сериализации"""

    def test_validation_coerces_numbers(self) -> None:
        z = Complex(real=1, imaginary=-2)
        assert z == Complex.of_cartesian(1.0, -2.0)

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Complex(real="abc", imaginary=0.0)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Complex(real=1.0)

    def test_immutability(self) -> None:
        z = Complex.of_cartesian(1.0, 2.0)
        with pytest.raises(ValidationError):
            z.real = 3.0

    def test_mapping_round_trip(self) -> None:
        z = Complex.of_cartesian(1.5, -0.0)
        data = z.model_dump()
        assert data == {"real": 1.5, "imaginary": -0.0}
        assert Complex.model_validate(data) == z

    def test_special_values_accepted(self) -> None:
        z = Complex.model_validate({"real": math.inf, "imaginary": math.nan})
        assert z.is_infinite
