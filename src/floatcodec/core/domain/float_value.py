"""
FloatValue — одно значение с плавающей точкой в памяти

Immutable Pydantic модель:
- Знак хранится отдельно (sign), модуль magnitude всегда неотрицателен
- Специальные значения: is_nan, is_inf (magnitude у них нулевой)
- Битовые поля exponent/mantissa_bits производные: заполняются только
  кодированием (encode) или декодированием (decode); None — "ещё не закодировано"

Модель не поддерживает автоматическую согласованность magnitude и битовых полей.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from floatcodec.core.math.rational import ZERO, Rational


class FloatValue(BaseModel):
    """
    Значение с плавающей точкой: знак, спец-флаги, точный модуль, биты.

    Immutable модель (frozen=True). Экземпляры не ссылаются друг на друга.
    """

    sign: bool = Field(False, description="True для отрицательных значений")
    is_nan: bool = Field(False, description="NaN")
    is_inf: bool = Field(False, description="Бесконечность (знак в sign)")
    magnitude: Rational = Field(ZERO, description="Точный модуль значения")

    exponent: int | None = Field(None, description="Несмещённая экспонента (после encode)")
    mantissa_bits: tuple[int, ...] | None = Field(
        None, description="Биты мантиссы без скрытого бита (после encode)"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude(cls, v: Rational) -> Rational:
        """Модуль неотрицателен (знак хранится в sign)"""
        if v.is_negative():
            raise ValueError(f"magnitude must be non-negative, got {v}")
        return v

    @field_validator("mantissa_bits")
    @classmethod
    def validate_mantissa_bits(cls, v: tuple[int, ...] | None) -> tuple[int, ...] | None:
        """Мантисса состоит только из 0 и 1"""
        if v is not None and any(bit not in (0, 1) for bit in v):
            raise ValueError(f"mantissa_bits must contain only 0 and 1, got {v}")
        return v

    @model_validator(mode="after")
    def validate_special_values(self) -> "FloatValue":
        """NaN и Inf взаимоисключающие и не несут модуля"""
        if self.is_nan and self.is_inf:
            raise ValueError("value cannot be both NaN and Inf")
        if (self.is_nan or self.is_inf) and not self.magnitude.is_zero():
            raise ValueError("NaN/Inf must carry a zero magnitude")
        return self

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def nan(cls) -> "FloatValue":
        return cls(is_nan=True)

    @classmethod
    def infinity(cls, negative: bool = False) -> "FloatValue":
        return cls(sign=negative, is_inf=True)

    @classmethod
    def zero(cls, negative: bool = False) -> "FloatValue":
        return cls(sign=negative)

    @classmethod
    def from_rational(cls, value: Rational) -> "FloatValue":
        """
        Конечное значение из знаковой дроби.

        Знак берётся из дроби; ноль всегда положительный.
        """
        return cls(sign=value.is_negative(), magnitude=value.abs())

    @classmethod
    def from_int(cls, value: int) -> "FloatValue":
        return cls.from_rational(Rational(value))

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    @property
    def is_finite(self) -> bool:
        return not self.is_nan and not self.is_inf

    @property
    def is_zero(self) -> bool:
        """Конечный ноль любого знака"""
        return self.is_finite and self.magnitude.is_zero()

    @property
    def is_encoded(self) -> bool:
        return self.exponent is not None and self.mantissa_bits is not None

    def signed_value(self) -> Rational:
        """Модуль со знаком (только для конечных значений)."""
        return self.magnitude.neg() if self.sign else self.magnitude

    def negate(self) -> "FloatValue":
        """Копия с противоположным знаком (биты сохраняются)."""
        return self.model_copy(update={"sign": not self.sign})

    def same_encoding(self, other: "FloatValue") -> bool:
        """
        Побитовое равенство закодированных значений.

        Сравнивается полный кортеж (sign, is_nan, is_inf, exponent, mantissa_bits).
        """
        return (
            self.sign == other.sign
            and self.is_nan == other.is_nan
            and self.is_inf == other.is_inf
            and self.exponent == other.exponent
            and self.mantissa_bits == other.mantissa_bits
        )
