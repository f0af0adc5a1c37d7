"""
Complex — комплексное число с семантикой IEEE754 / ISO C99 Annex G

Immutable Pydantic модель (real, imaginary). Каждая операция возвращает новый
экземпляр; алгоритмы реализованы в complexmath.core.math над парами float,
модель лишь оборачивает результат.

Текстовый формат: "(re,im)", где re/im — repr(float) (кратчайшая запись,
однозначно восстанавливаемая float()).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство по битовым шаблонам частей: -0.0 != 0.0, NaN == NaN
   (любой NaN канонизируется)
2. hash согласован с равенством
3. parse(str(z)) == z бит-в-бит (кроме payload NaN)
4. Классификация (is_nan, is_infinite, is_finite) вычисляется, не хранится:
   значение с NaN и бесконечной частью — бесконечное, не NaN
"""

from __future__ import annotations

import logging
import math
from typing import Final, Union

from pydantic import BaseModel, Field

from complexmath.core.math import arithmetic, elementary, hyperbolic, inverse
from complexmath.core.math.bits import canonical_bits, is_negative
from complexmath.core.math.constants import PI_OVER_2
from complexmath.core.math.hypot import hypot
from complexmath.core.math.numerical_safeguards import safe_divide
from complexmath.core.math.pairs import ComplexPair, cartesian, multiply_negative_i

logger = logging.getLogger(__name__)

# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================

# Минимальная длина строки: "(x,y)"
FORMAT_MIN_LEN: Final[int] = 5

FORMAT_START: Final[str] = "("
FORMAT_END: Final[str] = ")"
FORMAT_SEP: Final[str] = ","

# Минимальный индекс разделителя: "(x,", число из хотя бы одного символа
BEFORE_SEP: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexFormatError(ValueError):
    """
    Строка не соответствует формату "(re,im)".

    Attributes:
        text: Исходная строка
        reason: Причина отказа
        part: Фрагмент, вызвавший отказ
    """

    def __init__(self, reason: str, part: str, text: str) -> None:
        self.text = text
        self.reason = reason
        self.part = part
        super().__init__(f"{reason} '{part}' for input \"{text}\"")


class ComplexDomainError(ValueError):
    """
    Операция не определена для аргумента (корень нулевой степени).

    Attributes:
        n: Степень корня
    """

    def __init__(self, n: int) -> None:
        self.n = n
        super().__init__("cannot compute zeroth root")


# =============================================================================
# COMPLEX MODEL
# =============================================================================

Operand = Union["Complex", float, int]


class Complex(BaseModel):
    """
    Комплексное число real + i*imaginary.

    Immutable модель (frozen=True): операции создают новые экземпляры.
    Значения создаются фабриками (of_cartesian, of_polar, of_cis, parse,
    from_complex) или валидацией Pydantic.
    """

    real: float = Field(..., description="Вещественная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of_cartesian(cls, real: float, imaginary: float) -> Complex:
        """Комплексное число из декартовых координат."""
        return cls.model_construct(real=float(real), imaginary=float(imaginary))

    @classmethod
    def _of_pair(cls, pair: ComplexPair) -> Complex:
        return cls.model_construct(real=pair[0], imaginary=pair[1])

    @classmethod
    def of_polar(cls, rho: float, theta: float) -> Complex:
        """
        Комплексное число из полярных координат: rho * cis(theta).

        Args:
            rho: Модуль (неотрицательный, не NaN)
            theta: Аргумент в радианах (конечный)

        Returns:
            NAN для неконечного theta, отрицательного (включая -0.0) или NaN rho
        """
        return cls._of_pair(elementary.polar(float(rho), float(theta)))

    @classmethod
    def of_cis(cls, x: float) -> Complex:
        """cos(x) + i sin(x); NaN для бесконечного x."""
        return cls._of_pair(elementary.cis(float(x)))

    @classmethod
    def from_complex(cls, value: complex) -> Complex:
        """Конверсия из встроенного complex."""
        return cls.of_cartesian(value.real, value.imag)

    @classmethod
    def parse(cls, s: str) -> Complex:
        """
        Разбор строки формата "(re,im)".

        Пробелы вокруг чисел допускаются (float() их отбрасывает).

        Args:
            s: Строка вида "(1.5,-2.0)"

        Returns:
            Комплексное число

        Raises:
            ComplexFormatError: Если строка не соответствует формату

        Examples:
            >>> Complex.parse("(1.0,-0.0)")
            Complex(real=1.0, imaginary=-0.0)
        """
        length = len(s)
        if length < FORMAT_MIN_LEN:
            expected = FORMAT_START + "x" + FORMAT_SEP + "y" + FORMAT_END
            raise _format_error("Input too short, expected format", expected, s)

        if s[0] != FORMAT_START:
            raise _format_error("Expected start delimiter", FORMAT_START, s)

        if s[-1] != FORMAT_END:
            raise _format_error("Expected end delimiter", FORMAT_END, s)

        # Разделитель не ближе двух символов к концу: "(x,x)"
        sep = s.rfind(FORMAT_SEP, 0, length - 2)
        if sep < BEFORE_SEP:
            raise _format_error("Expected separator between two numbers", FORMAT_SEP, s)

        if s.find(FORMAT_SEP, sep + 1) != -1:
            raise _format_error(
                "Incorrect number of parts, expected only 2 using separator", FORMAT_SEP, s
            )

        re_part = s[1:sep]
        try:
            re = float(re_part)
        except ValueError:
            raise _format_error("Could not parse real part", re_part, s) from None

        im_part = s[sep + 1 : length - 1]
        try:
            im = float(im_part)
        except ValueError:
            raise _format_error("Could not parse imaginary part", im_part, s) from None

        return cls.of_cartesian(re, im)

    # -------------------------------------------------------------------------
    # Классификация и свойства
    # -------------------------------------------------------------------------

    @property
    def is_nan(self) -> bool:
        """True если любая часть NaN и значение не бесконечно."""
        if math.isnan(self.real) or math.isnan(self.imaginary):
            return not self.is_infinite
        return False

    @property
    def is_infinite(self) -> bool:
        """True если любая часть ±inf (даже если другая NaN)."""
        return math.isinf(self.real) or math.isinf(self.imaginary)

    @property
    def is_finite(self) -> bool:
        """True если обе части конечны."""
        return math.isfinite(self.real) and math.isfinite(self.imaginary)

    def abs(self) -> float:
        """Модуль |z| без промежуточного переполнения (hypot)."""
        return hypot(self.real, self.imaginary)

    def arg(self) -> float:
        """Аргумент atan2(imaginary, real) в (-π, π]."""
        return math.atan2(self.imaginary, self.real)

    def norm(self) -> float:
        """
        Квадрат модуля real^2 + imaginary^2, +inf для бесконечного значения.

        Без расширенной точности: norm() == abs()^2 не гарантируется.
        """
        if self.is_infinite:
            return math.inf
        return self.real * self.real + self.imaginary * self.imaginary

    # -------------------------------------------------------------------------
    # Простые преобразования
    # -------------------------------------------------------------------------

    def conj(self) -> Complex:
        return Complex.of_cartesian(self.real, -self.imaginary)

    def negate(self) -> Complex:
        return Complex.of_cartesian(-self.real, -self.imaginary)

    def proj(self) -> Complex:
        """Проекция на сферу Римана: (+inf, ±0) для бесконечного значения."""
        if self.is_infinite:
            return Complex.of_cartesian(math.inf, math.copysign(0.0, self.imaginary))
        return self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, addend: Operand) -> Complex:
        """
        Сумма. Для вещественного слагаемого мнимая часть не затрагивается
        (сохраняется -0.0).
        """
        if isinstance(addend, Complex):
            return Complex.of_cartesian(self.real + addend.real, self.imaginary + addend.imaginary)
        return Complex.of_cartesian(self.real + addend, self.imaginary)

    def add_imaginary(self, addend: float) -> Complex:
        """Прибавить addend к мнимой части; вещественная не затрагивается."""
        return Complex.of_cartesian(self.real, self.imaginary + addend)

    def subtract(self, subtrahend: Operand) -> Complex:
        if isinstance(subtrahend, Complex):
            return Complex.of_cartesian(
                self.real - subtrahend.real, self.imaginary - subtrahend.imaginary
            )
        return Complex.of_cartesian(self.real - subtrahend, self.imaginary)

    def subtract_imaginary(self, subtrahend: float) -> Complex:
        return Complex.of_cartesian(self.real, self.imaginary - subtrahend)

    def subtract_from(self, minuend: float) -> Complex:
        """minuend - z, где minuend вещественное."""
        return Complex.of_cartesian(minuend - self.real, -self.imaginary)

    def subtract_from_imaginary(self, minuend: float) -> Complex:
        """i*minuend - z."""
        return Complex.of_cartesian(-self.real, minuend - self.imaginary)

    def multiply(self, factor: Operand) -> Complex:
        """
        Произведение с восстановлением бесконечностей по C99 G.5.1.

        Вещественный множитель масштабирует обе части без восстановления.
        """
        if isinstance(factor, Complex):
            return Complex._of_pair(
                arithmetic.multiply(self.real, self.imaginary, factor.real, factor.imaginary)
            )
        return Complex.of_cartesian(self.real * factor, self.imaginary * factor)

    def multiply_imaginary(self, factor: float) -> Complex:
        """z * (i*factor) = (-imaginary*factor, real*factor)."""
        return Complex.of_cartesian(-self.imaginary * factor, self.real * factor)

    def divide(self, divisor: Operand) -> Complex:
        """
        Частное. Деление на ±0.0 следует IEEE754: ±inf или NaN, без исключения.

        Examples:
            >>> ONE.divide(ZERO)
            Complex(real=inf, imaginary=nan)
        """
        if isinstance(divisor, Complex):
            return Complex._of_pair(
                arithmetic.divide(self.real, self.imaginary, divisor.real, divisor.imaginary)
            )
        return Complex.of_cartesian(
            safe_divide(self.real, divisor), safe_divide(self.imaginary, divisor)
        )

    def divide_imaginary(self, divisor: float) -> Complex:
        """z / (i*divisor) = (imaginary/divisor, -real/divisor)."""
        return Complex.of_cartesian(
            safe_divide(self.imaginary, divisor), safe_divide(-self.real, divisor)
        )

    # -------------------------------------------------------------------------
    # Экспонента, логарифмы, степени, корни
    # -------------------------------------------------------------------------

    def exp(self) -> Complex:
        return Complex._of_pair(elementary.exp(self.real, self.imaginary))

    def log(self) -> Complex:
        """Натуральный логарифм, ветвь с мнимой частью в (-π, π]."""
        return Complex._of_pair(elementary.log_natural(self.real, self.imaginary))

    def log10(self) -> Complex:
        return Complex._of_pair(elementary.log_base10(self.real, self.imaginary))

    def pow(self, exponent: Operand) -> Complex:
        """
        Степень z^w = exp(log(z) * w).

        Для нулевого основания: ZERO при положительном вещественном показателе
        (для комплексного показателя — с нулевой мнимой частью), иначе NAN.
        """
        if self.real == 0.0 and self.imaginary == 0.0:
            if isinstance(exponent, Complex):
                positive_real = exponent.real > 0 and exponent.imaginary == 0.0
            else:
                positive_real = exponent > 0
            return ZERO if positive_real else NAN
        return self.log().multiply(exponent).exp()

    def sqrt(self) -> Complex:
        return Complex._of_pair(elementary.sqrt(self.real, self.imaginary))

    def nth_root(self, n: int) -> list[Complex]:
        """
        Все |n| корней степени n.

        Raises:
            ComplexDomainError: Если n == 0
        """
        if n == 0:
            logger.debug("nth_root called with n=0 for %s", self)
            raise ComplexDomainError(n)
        return [Complex._of_pair(pair) for pair in elementary.nth_root(self.real, self.imaginary, n)]

    # -------------------------------------------------------------------------
    # Тригонометрические и гиперболические функции
    # -------------------------------------------------------------------------

    def sin(self) -> Complex:
        # sin(z) = -i sinh(iz)
        return Complex._of_pair(hyperbolic.sinh(-self.imaginary, self.real, multiply_negative_i))

    def cos(self) -> Complex:
        # cos(z) = cosh(iz)
        return Complex._of_pair(hyperbolic.cosh(-self.imaginary, self.real, cartesian))

    def tan(self) -> Complex:
        # tan(z) = -i tanh(iz)
        return Complex._of_pair(hyperbolic.tanh(-self.imaginary, self.real, multiply_negative_i))

    def sinh(self) -> Complex:
        return Complex._of_pair(hyperbolic.sinh(self.real, self.imaginary, cartesian))

    def cosh(self) -> Complex:
        return Complex._of_pair(hyperbolic.cosh(self.real, self.imaginary, cartesian))

    def tanh(self) -> Complex:
        return Complex._of_pair(hyperbolic.tanh(self.real, self.imaginary, cartesian))

    # -------------------------------------------------------------------------
    # Обратные функции
    # -------------------------------------------------------------------------

    def asin(self) -> Complex:
        return Complex._of_pair(inverse.asin(self.real, self.imaginary, cartesian))

    def acos(self) -> Complex:
        return Complex._of_pair(inverse.acos(self.real, self.imaginary, cartesian))

    def atan(self) -> Complex:
        # atan(z) = -i atanh(iz)
        return Complex._of_pair(inverse.atanh(-self.imaginary, self.real, multiply_negative_i))

    def asinh(self) -> Complex:
        # asinh(z) = -i asin(iz)
        return Complex._of_pair(inverse.asin(-self.imaginary, self.real, multiply_negative_i))

    def acosh(self) -> Complex:
        """
        acosh(z) = ±i acos(z): знак выбирается так, чтобы real(acosh) >= 0.

        (±0 + iNaN) даёт (NaN + iπ/2).
        """
        if math.isnan(self.imaginary) and self.real == 0.0:
            return Complex.of_cartesian(math.nan, PI_OVER_2)
        return Complex._of_pair(inverse.acos(self.real, self.imaginary, _acosh_rotation))

    def atanh(self) -> Complex:
        return Complex._of_pair(inverse.atanh(self.real, self.imaginary, cartesian))

    # -------------------------------------------------------------------------
    # Равенство, hash, текст
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Complex):
            return NotImplemented
        return canonical_bits(self.real) == canonical_bits(other.real) and canonical_bits(
            self.imaginary
        ) == canonical_bits(other.imaginary)

    def __hash__(self) -> int:
        return hash((canonical_bits(self.real), canonical_bits(self.imaginary)))

    def to_string(self) -> str:
        """Текстовое представление "(re,im)"."""
        return FORMAT_START + repr(self.real) + FORMAT_SEP + repr(self.imaginary) + FORMAT_END

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.subtract_from(other)

    def __mul__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex.of_cartesian(other, 0.0).divide(self)

    def __pow__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.pow(other)

    def __neg__(self) -> Complex:
        return self.negate()

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)


def _format_error(reason: str, part: str, text: str) -> ComplexFormatError:
    logger.debug("Complex.parse rejected %r: %s", text, reason)
    return ComplexFormatError(reason, part, text)


def _acosh_rotation(re: float, im: float) -> ComplexPair:
    """Умножение на i при отрицательной мнимой части, иначе на -i."""
    if is_negative(im):
        return (-im, re)
    return (im, -re)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Complex] = Complex.of_cartesian(0.0, 0.0)
ONE: Final[Complex] = Complex.of_cartesian(1.0, 0.0)
I: Final[Complex] = Complex.of_cartesian(0.0, 1.0)
NAN: Final[Complex] = Complex.of_cartesian(math.nan, math.nan)
