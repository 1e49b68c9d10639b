"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций над шкалами:
- Проверка валидности float (NaN/Inf)
- Ограничение значений диапазоном (clamp)
- Квантование значений по шагу (растеризация шкалы)
- Линейная интерполяция, точная на концах отрезка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lerp(a, b, 0.0) == a и lerp(a, b, 1.0) == b точно (без ошибки округления)
2. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОГРАНИЧЕНИЕ И КВАНТОВАНИЕ
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
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def round_to_step(value: float, step: float) -> float:
    """
    Округление значения до ближайшего кратного step.

    Используется для растеризации шкалы: значение "прилипает" к сетке
    с шагом step. Округление half away from zero (0.5 шага → от нуля).

    Args:
        value: Значение для округления
        step: Шаг сетки (> 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> round_to_step(85.0, 10.0)
        90.0
        >>> round_to_step(84.9, 10.0)
        80.0
        >>> round_to_step(-85.0, 10.0)
        -90.0
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    ratio = value / step

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps * step


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


def lerp(a: float, b: float, t: float) -> float:
    """
    Линейная интерполяция между a и b.

    Форма a * (1 - t) + b * t даёт точные значения на концах:
    lerp(a, b, 0) == a, lerp(a, b, 1) == b. Для t вне [0, 1] выполняется
    линейная экстраполяция.

    Args:
        a: Значение при t = 0
        b: Значение при t = 1
        t: Параметр интерполяции

    Returns:
        Интерполированное значение

    Examples:
        >>> lerp(0.0, 100.0, 0.5)
        50.0
        >>> lerp(10.0, 20.0, 1.0)
        20.0
        >>> lerp(0.0, 100.0, -1.0)
        -100.0
    """
    return a * (1.0 - t) + b * t
