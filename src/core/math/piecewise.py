"""
Piecewise — Broken Scale Mapping

Кусочно-линейное отображение между внешней позицией x (то, что видит
вызывающий код) и внутренней позицией y (то, что видит преобразование шкалы).

Точки излома (x, y) задаются строго возрастающими внутри открытого квадрата
(0, 1)²; ломаная замыкается точками (0, 0) и (1, 1).

Пример: излом [(0.5, 0.3)] на линейной шкале 0..100 означает, что первая
половина хода слайдера покрывает 0..30, вторая — 30..100.

Вне [0, 1] продолжается первый/последний отрезок (линейная экстраполяция).
"""

from bisect import bisect_left
from typing import Sequence

from src.core.math.numerical_safeguards import is_valid_float, lerp
from src.core.math.transforms import ScaleDomainError

Breakpoint = tuple[float, float]


def validate_breakpoints(breakpoints: Sequence[Breakpoint]) -> None:
    """
    Проверка точек излома.

    Args:
        breakpoints: Последовательность пар (x, y)

    Raises:
        ScaleDomainError: если точка вне (0, 1)², NaN/Inf, или последовательность
            не строго возрастает по x и по y
    """
    previous: Breakpoint = (0.0, 0.0)

    for x, y in breakpoints:
        if not (is_valid_float(x) and is_valid_float(y)):
            raise ScaleDomainError(f"Breakpoint ({x}, {y}) must be finite")

        if not (0.0 < x < 1.0 and 0.0 < y < 1.0):
            raise ScaleDomainError(
                f"Breakpoint ({x}, {y}) must lie strictly inside (0, 1) x (0, 1)"
            )

        if x <= previous[0] or y <= previous[1]:
            raise ScaleDomainError(
                f"Breakpoints must be strictly increasing in x and y, "
                f"got ({x}, {y}) after {previous}"
            )

        previous = (x, y)


def _closed(breakpoints: Sequence[Breakpoint]) -> list[Breakpoint]:
    return [(0.0, 0.0), *breakpoints, (1.0, 1.0)]


def _map(points: list[Breakpoint], coordinate: float, src: int, dst: int) -> float:
    keys = [p[src] for p in points]

    # Отрезок [i-1, i], содержащий coordinate; за краями — крайний отрезок
    i = bisect_left(keys, coordinate)
    i = min(max(i, 1), len(points) - 1)

    start, end = points[i - 1], points[i]
    t = (coordinate - start[src]) / (end[src] - start[src])

    return lerp(start[dst], end[dst], t)


def outer_to_inner(breakpoints: Sequence[Breakpoint], position: float) -> float:
    """
    Внешняя позиция x → внутренняя позиция y.

    Args:
        breakpoints: Валидные точки излома (см. validate_breakpoints)
        position: Внешняя позиция

    Returns:
        Внутренняя позиция; без точек излома — position без изменений

    Examples:
        >>> outer_to_inner([(0.5, 0.3)], 0.5)
        0.3
        >>> outer_to_inner([(0.5, 0.3)], 1.0)
        1.0
    """
    if not breakpoints:
        return position
    return _map(_closed(breakpoints), position, 0, 1)


def inner_to_outer(breakpoints: Sequence[Breakpoint], position: float) -> float:
    """
    Внутренняя позиция y → внешняя позиция x (обратное к outer_to_inner).

    Examples:
        >>> inner_to_outer([(0.5, 0.3)], 0.3)
        0.5
    """
    if not breakpoints:
        return position
    return _map(_closed(breakpoints), position, 1, 0)
