"""
Conversions — Температура, расстояние, валюта

Единственный допустимый способ преобразований между:
- Celsius / Fahrenheit / Kelvin
- feet / meters
- amount × exchange rate (Decimal)

Температура и расстояние — тотальные функции над float без валидации
(NaN пропагирует как есть). Валюта считается в decimal.Decimal, чтобы
денежный результат не содержал артефактов двоичного float.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow
from typing import Optional, Union

from src.core.constants import (
    CELSIUS_SCALE,
    CELSIUS_TO_KELVIN_OFFSET,
    CURRENCY_DEFAULT_PLACES,
    CURRENCY_ONE,
    FAHRENHEIT_FREEZING_POINT,
    FAHRENHEIT_SCALE,
    FEET_TO_METERS,
)
from src.core.errors import InvalidArgument

MoneyLike = Union[Decimal, int, float, str]


# =============================================================================
# ТЕМПЕРАТУРА
# =============================================================================


def celsius_to_fahrenheit(celsius: float) -> float:
    """F = C × 9/5 + 32"""
    return celsius * FAHRENHEIT_SCALE + FAHRENHEIT_FREEZING_POINT


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """C = (F − 32) × 5/9"""
    return (fahrenheit - FAHRENHEIT_FREEZING_POINT) * CELSIUS_SCALE


def celsius_to_kelvin(celsius: float) -> float:
    """K = C + 273.15"""
    return celsius + CELSIUS_TO_KELVIN_OFFSET


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """K = C(F) + 273.15"""
    return fahrenheit_to_celsius(fahrenheit) + CELSIUS_TO_KELVIN_OFFSET


# =============================================================================
# РАССТОЯНИЕ
# =============================================================================


def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def meters_to_feet(meters: float) -> float:
    return meters / FEET_TO_METERS


# =============================================================================
# ВАЛЮТА
# =============================================================================


def to_decimal(value: MoneyLike, name: str = "amount") -> Decimal:
    """
    Приведение денежного значения к Decimal.

    int, str и Decimal используются точно. float идёт через кратчайшее
    repr (Decimal(str(x))): 1.1 → Decimal('1.1'), а не
    Decimal('1.100000000000000088817841970012523233890533447265625').

    Raises:
        InvalidArgument: bool, нераспознанная строка, NaN/Inf или неподдерживаемый тип
    """
    if isinstance(value, bool):
        raise InvalidArgument(name, value, "booleans are not monetary values")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgument(name, value, "not a decimal number") from exc
    else:
        raise InvalidArgument(name, value, f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgument(name, value, "must be finite")

    return result


def round_currency(amount: MoneyLike, places: int = CURRENCY_DEFAULT_PLACES) -> Decimal:
    """
    Квантование суммы до places знаков (ROUND_HALF_UP).

    Examples:
        >>> round_currency(Decimal("2.675"))
        Decimal('2.68')
        >>> round_currency("10", places=0)
        Decimal('10')
    """
    if places < 0:
        raise InvalidArgument("places", places, "must be non-negative")

    value = to_decimal(amount)
    quantum = CURRENCY_ONE.scaleb(-places)
    try:
        return value.quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        # Результат не помещается в точность Decimal-контекста (28 цифр)
        raise InvalidArgument("amount", amount, "exceeds decimal precision") from exc


def convert_currency(
    amount: MoneyLike,
    rate: MoneyLike,
    places: Optional[int] = None,
) -> Decimal:
    """
    Конверсия суммы по курсу: amount × rate в Decimal.

    Args:
        amount: Сумма в базовой валюте
        rate: Курс (единиц целевой валюты за единицу базовой)
        places: Если задано, результат квантуется (ROUND_HALF_UP)

    Returns:
        Сумма в целевой валюте

    Raises:
        InvalidArgument: Если amount или rate не интерпретируются как конечное число
            или результат не помещается в Decimal-контекст

    Examples:
        >>> convert_currency(100, 1.1)
        Decimal('110.0')
        >>> convert_currency("19.99", "0.9137", places=2)
        Decimal('18.26')
    """
    amount_value = to_decimal(amount, "amount")
    rate_value = to_decimal(rate, "rate")
    try:
        result = amount_value * rate_value
    except Overflow as exc:
        raise InvalidArgument("amount", amount, "product exceeds decimal exponent range") from exc

    if places is not None:
        return round_currency(result, places)

    return result
