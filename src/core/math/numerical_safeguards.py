"""
Numerical Safeguards — Safe Math Primitives

Минимальный набор примитивов численной устойчивости для расчётного ядра:
- Проверка конечности float (NaN/Inf)
- Clamp промежуточных значений тригонометрии в допустимый домен

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf на входе геодезии отвергаются (InvalidArgument), а не пропагируют
2. Промежуточные значения вне домена sqrt/atan2 clamp-ятся, а не дают NaN
3. Все операции детерминированы и воспроизводимы
"""

import math

from src.core.errors import InvalidArgument

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация конечности значения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        InvalidArgument: Если value NaN/Inf или не число
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(name, value, "must be a real number") from exc

    if not is_valid_float(result):
        raise InvalidArgument(name, value, "must be a valid float (not NaN/Inf)")

    return result


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(0.5, 0.0, 1.0)
        0.5
        >>> clamp(-1e-17, 0.0, 1.0)
        0.0
        >>> clamp(1.0000000000000002, 0.0, 1.0)
        1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
