"""
Transforms — Guarded Logarithmic & Exponential Primitives

Модуль содержит примитивы преобразования шкал с доменными проверками:
- log10(x) определён только для x > 0
- 10 ** x определён только пока результат конечен (нет переполнения)
- NaN/Inf на входе или выходе → ScaleDomainError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Доменная проверка выполняется ДО вызова log10 / pow
2. NaN/Inf никогда не возвращаются вызывающему коду
3. Основание логарифма фиксировано: 10
"""

import logging
import math

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScaleDomainError(Exception):
    """
    Нарушение домена шкалы.

    Возникает при:
    1. Вырожденном диапазоне (min == max)
    2. Неположительной границе или значении для логарифмической шкалы
    3. Неположительном аргументе log10 для экспоненциальной шкалы
    4. NaN/Inf в границах, входе или результате преобразования

    Наследуется от Exception (не ValueError): pydantic пропускает такое
    исключение из валидаторов модели без оборачивания в ValidationError.
    """

    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def check_finite(value: float, name: str) -> float:
    """
    Проверка, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ScaleDomainError: если value NaN/Inf
    """
    if not is_valid_float(value):
        logger.debug("Non-finite %s rejected: %r", name, value)
        raise ScaleDomainError(f"{name} must be a finite float (not NaN/Inf), got {value}")
    return value


# =============================================================================
# LOG / POW
# =============================================================================


def safe_log10(value: float, name: str = "value") -> float:
    """
    Доменно-безопасный log10.

    Args:
        value: Аргумент логарифма (> 0)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        log10(value)

    Raises:
        ScaleDomainError: если value <= 0 или NaN/Inf

    Examples:
        >>> safe_log10(1000.0)
        3.0
        >>> safe_log10(0.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ScaleDomainError: ...
    """
    check_finite(value, name)

    if value <= 0:
        logger.debug("log10 domain violation: %s=%r", name, value)
        raise ScaleDomainError(
            f"Logarithmic domain violation: {name}={value!r} must be > 0"
        )

    return math.log10(value)


def safe_pow10(exponent: float, name: str = "exponent") -> float:
    """
    Доменно-безопасное 10 ** exponent.

    Args:
        exponent: Показатель степени
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        10 ** exponent

    Raises:
        ScaleDomainError: если exponent NaN/Inf или результат переполняет float

    Examples:
        >>> safe_pow10(2.0)
        100.0
        >>> safe_pow10(-1.0)
        0.1
    """
    check_finite(exponent, name)

    try:
        result = math.pow(10.0, exponent)
    except OverflowError as e:
        logger.debug("pow10 overflow: %s=%r", name, exponent)
        raise ScaleDomainError(
            f"Exponential domain violation: 10 ** {name}={exponent!r} overflows float"
        ) from e

    return result
