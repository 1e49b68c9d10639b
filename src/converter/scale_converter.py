"""Scale Converter — конверсия значений между шкалами

Конверсия = normalize на исходной шкале + denormalize на целевой:
    convert(source, target, v) = target.denormalize(source.normalize(v))

ScaleConverter связывает пару шкал:
- external — шкала, которой управляет пользователь (например, UI слайдер 0..100)
- internal — шкала параметра (например, частота фильтра 20..20000 Гц, log)

и предоставляет конверсию в обе стороны плюс арифметику приращений:
приращение, заданное в единицах одной шкалы, применяется к значению другой.

Ошибки домена (ScaleDomainError) пропагируют без обёртки.
"""

import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field

from src.core.contracts import validate_scale_converter_config
from src.core.domain.scale import Scale
from src.core.math.numerical_safeguards import clamp

logger = logging.getLogger(__name__)


# =============================================================================
# FREE FUNCTION
# =============================================================================


def convert(source: Scale, target: Scale, value: float) -> float:
    """Конверсия value из домена source в домен target.

    Значения вне диапазона source экстраполируются, не обрезаются.
    Для source == target возвращается value без изменений.

    Args:
        source: исходная шкала
        target: целевая шкала
        value: значение в домене source

    Returns:
        Соответствующее значение в домене target

    Raises:
        ScaleDomainError: из source.normalize / target.denormalize

    Examples:
        >>> convert(Scale.linear(0.0, 100.0), Scale.linear(-1.0, 1.0), 25.0)
        -0.5
    """
    return source.convert(value, target)


# =============================================================================
# SCALE CONVERTER
# =============================================================================


class ScaleConverter(BaseModel):
    """Пара шкал external/internal.

    Immutable модель (frozen=True), не хранит состояния между вызовами.
    """

    external: Scale = Field(..., description="Внешняя шкала (например, UI слайдер)")
    internal: Scale = Field(..., description="Внутренняя шкала (например, параметр DSP)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "ScaleConverter":
        """Создание пары шкал из конфигурации.

        Args:
            data: {"external": {...}, "internal": {...}} по контрактам
                contracts/schema/scale_converter.json и scale.json

        Raises:
            jsonschema.ValidationError: конфигурация не соответствует схеме
            ScaleDomainError: одна из шкал невалидна
        """
        validate_scale_converter_config(dict(data))
        return cls(
            external=Scale.from_config(data["external"]),
            internal=Scale.from_config(data["internal"]),
        )

    def reversed(self) -> "ScaleConverter":
        """Та же пара с переставленными ролями external/internal."""
        return ScaleConverter(external=self.internal, internal=self.external)

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def convert(self, external_value: float) -> float:
        """external → internal."""
        return self.external.convert(external_value, self.internal)

    def convert_back(self, internal_value: float) -> float:
        """internal → external."""
        return self.internal.convert(internal_value, self.external)

    # =========================================================================
    # DELTAS
    # =========================================================================

    def add_external(self, external_delta: float, internal_value: float) -> float:
        """Применение приращения external шкалы к internal значению.

        Пример: слайдер сдвинули на +10 делений — каким станет параметр?

        Returns:
            convert(convert_back(internal_value) + external_delta)
        """
        external_value = self.convert_back(internal_value)
        return self.convert(external_value + external_delta)

    def add_internal(self, internal_delta: float, external_value: float) -> float:
        """Применение приращения internal шкалы к external значению.

        Returns:
            convert_back(convert(external_value) + internal_delta)
        """
        internal_value = self.convert(external_value)
        return self.convert_back(internal_value + internal_delta)

    def add_external_clamped(self, external_delta: float, internal_value: float) -> float:
        """add_external с обрезкой результата до границ internal шкалы."""
        value = self.add_external(external_delta, internal_value)
        return self._clamp_to(self.internal, value)

    def add_internal_clamped(self, internal_delta: float, external_value: float) -> float:
        """add_internal с обрезкой результата до границ external шкалы."""
        value = self.add_internal(internal_delta, external_value)
        return self._clamp_to(self.external, value)

    @staticmethod
    def _clamp_to(scale: Scale, value: float) -> float:
        clamped = clamp(value, scale.lower, scale.upper)
        if clamped != value:
            logger.debug(
                "Clamped %r to %r within [%r, %r]", value, clamped, scale.lower, scale.upper
            )
        return clamped
