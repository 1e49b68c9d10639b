"""Converter — конверсия значений между шкалами.

- convert(source, target, value): свободная функция
- ScaleConverter: пара шкал external/internal с арифметикой приращений
"""

from .scale_converter import ScaleConverter, convert

__all__ = [
    "ScaleConverter",
    "convert",
]
