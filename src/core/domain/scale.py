"""
Scale — Модель числовой шкалы

Immutable Pydantic модель: диапазон [min, max] + тип преобразования,
определяющий, как абсолютное значение отображается в относительную позицию
и обратно.

ФОРМУЛЫ (основание логарифма 10):
    LINEAR:       position = (v - min) / (max - min)
    LOGARITHMIC:  position = (log10(v) - log10(min)) / (log10(max) - log10(min))
    EXPONENTIAL:  position = (10**v - 10**min) / (10**max - 10**min)

    denormalize — точное обратное преобразование для каждого типа.

Значения вне [min, max] экстраполируются (не обрезаются). Обрезка доступна
явно через normalize_clamped / denormalize_clamped.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min != max; границы конечны
2. LOGARITHMIC: min > 0 и max > 0
3. EXPONENTIAL: 10**min и 10**max конечны
4. normalize/denormalize никогда не возвращают NaN/Inf (→ ScaleDomainError)
"""

import logging
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import validate_scale_config
from src.core.math.numerical_safeguards import clamp, is_valid_float, lerp, round_to_step
from src.core.math.piecewise import Breakpoint, inner_to_outer, outer_to_inner, validate_breakpoints
from src.core.math.transforms import ScaleDomainError, check_finite, safe_log10, safe_pow10

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ScaleKind(str, Enum):
    """Тип преобразования шкалы"""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    EXPONENTIAL = "exponential"


# =============================================================================
# SCALE MODEL
# =============================================================================


class Scale(BaseModel):
    """
    Модель числовой шкалы.

    Immutable модель (frozen=True): одна шкала переиспользуется в любом
    количестве конверсий и может свободно разделяться между потоками.

    Порядок применения (normalize):
        value → snap(step) → kind transform → [inverted] → breakpoints → position

    denormalize выполняет те же шаги в обратном порядке.
    """

    # Диапазон
    min: float = Field(..., description="Значение, соответствующее позиции 0")
    max: float = Field(..., description="Значение, соответствующее позиции 1")

    # Преобразование
    kind: ScaleKind = Field(default=ScaleKind.LINEAR, description="Тип преобразования")
    inverted: bool = Field(
        default=False, description="Инвертированная шкала: позиция 1 у min, 0 у max"
    )

    # Растеризация и излом
    step: float | None = Field(
        default=None,
        description="Шаг сетки для абсолютных значений, кратные step от 0 (optional)",
    )
    breakpoints: tuple[tuple[float, float], ...] = Field(
        default=(), description="Точки излома (x, y) кусочно-линейного отображения позиции"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("step")
    @classmethod
    def validate_step(cls, v: float | None) -> float | None:
        """Шаг сетки должен быть положительным."""
        if v is not None and not v > 0:
            raise ValueError(f"step must be positive, got {v}")
        return v

    @model_validator(mode="after")
    def validate_domain(self) -> "Scale":
        """
        Проверка домена шкалы.

        Raises:
            ScaleDomainError: вырожденный диапазон, NaN/Inf границы,
                неположительные границы LOGARITHMIC, переполнение EXPONENTIAL,
                невалидные точки излома
        """
        check_finite(self.min, "min")
        check_finite(self.max, "max")

        if self.min == self.max:
            logger.debug("Degenerate scale range rejected: min == max == %r", self.min)
            raise ScaleDomainError(
                f"Degenerate scale range: min == max == {self.min}"
            )

        if self.step is not None:
            check_finite(self.step, "step")

        low, high = self._transformed_bounds()
        span = high - low
        if span == 0 or not is_valid_float(span):
            raise ScaleDomainError(
                f"Degenerate {self.kind.value} range after transform: "
                f"[{low}, {high}] for min={self.min}, max={self.max}"
            )

        if self.kind is ScaleKind.LOGARITHMIC and self.step is not None:
            # Сетка шага привязана к 0: наименьшая граница не должна прилипать к 0
            self.snap(self.lower)

        validate_breakpoints(self.breakpoints)
        return self

    # =========================================================================
    # NAMED CONSTRUCTORS
    # =========================================================================

    @classmethod
    def linear(
        cls,
        min_value: float,
        max_value: float,
        *,
        inverted: bool = False,
        step: float | None = None,
        breakpoints: tuple[Breakpoint, ...] = (),
    ) -> "Scale":
        """Линейная шкала [min_value, max_value]."""
        return cls(
            min=min_value,
            max=max_value,
            kind=ScaleKind.LINEAR,
            inverted=inverted,
            step=step,
            breakpoints=breakpoints,
        )

    @classmethod
    def logarithmic(
        cls,
        min_value: float,
        max_value: float,
        *,
        inverted: bool = False,
        step: float | None = None,
        breakpoints: tuple[Breakpoint, ...] = (),
    ) -> "Scale":
        """
        Логарифмическая шкала [min_value, max_value].

        Равные шаги позиции соответствуют равным отношениям значений:
        для 20..20000 Гц позиция 0.5 — это геометрическое среднее ~632.46 Гц.
        """
        return cls(
            min=min_value,
            max=max_value,
            kind=ScaleKind.LOGARITHMIC,
            inverted=inverted,
            step=step,
            breakpoints=breakpoints,
        )

    @classmethod
    def exponential(
        cls,
        min_value: float,
        max_value: float,
        *,
        inverted: bool = False,
        step: float | None = None,
        breakpoints: tuple[Breakpoint, ...] = (),
    ) -> "Scale":
        """Экспоненциальная шкала (обратная к логарифмической) [min_value, max_value]."""
        return cls(
            min=min_value,
            max=max_value,
            kind=ScaleKind.EXPONENTIAL,
            inverted=inverted,
            step=step,
            breakpoints=breakpoints,
        )

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "Scale":
        """
        Создание шкалы из конфигурации (dict).

        Args:
            data: Конфигурация по контракту contracts/schema/scale.json

        Returns:
            Scale

        Raises:
            jsonschema.ValidationError: конфигурация не соответствует схеме
            ScaleDomainError: конфигурация описывает невалидную шкалу
        """
        validate_scale_config(dict(data))
        return cls.model_validate(dict(data))

    def to_config(self) -> dict[str, Any]:
        """Конфигурация шкалы в форме contracts/schema/scale.json."""
        return self.model_dump(mode="json")

    # =========================================================================
    # BOUNDS
    # =========================================================================

    @property
    def lower(self) -> float:
        """Меньшая из границ (шкала может быть убывающей)."""
        return min(self.min, self.max)

    @property
    def upper(self) -> float:
        """Большая из границ."""
        return max(self.min, self.max)

    def _forward(self, value: float, name: str) -> float:
        if self.kind is ScaleKind.LOGARITHMIC:
            return safe_log10(value, name)
        elif self.kind is ScaleKind.EXPONENTIAL:
            return safe_pow10(value, name)
        else:
            return check_finite(value, name)

    def _inverse(self, transformed: float) -> float:
        if self.kind is ScaleKind.LOGARITHMIC:
            value = safe_pow10(transformed, "transformed position")
            if value <= 0:
                raise ScaleDomainError(
                    f"Logarithmic domain violation: 10 ** {transformed!r} underflows to {value!r}"
                )
            return value
        elif self.kind is ScaleKind.EXPONENTIAL:
            return safe_log10(transformed, "transformed position")
        else:
            return check_finite(transformed, "value")

    def _transformed_bounds(self) -> tuple[float, float]:
        return self._forward(self.min, "min"), self._forward(self.max, "max")

    # =========================================================================
    # NORMALIZE / DENORMALIZE
    # =========================================================================

    def snap(self, value: float) -> float:
        """
        Растеризация значения по шагу шкалы.

        Returns:
            Ближайшее кратное step; без step — value без изменений

        Raises:
            ScaleDomainError: value / step или результат не представимы в float;
                LOGARITHMIC значение прилипает к 0
        """
        if self.step is None:
            return value
        if not is_valid_float(value / self.step):
            raise ScaleDomainError(
                f"Step rasterization overflow: value={value!r} / step={self.step!r} is not finite"
            )
        snapped = check_finite(round_to_step(value, self.step), "snapped value")
        if self.kind is ScaleKind.LOGARITHMIC and snapped <= 0:
            raise ScaleDomainError(
                f"Logarithmic domain violation: value={value!r} snaps to {snapped!r} with step={self.step!r}"
            )
        return snapped

    def normalize(self, value: float) -> float:
        """
        Абсолютное значение → относительная позиция.

        Значения вне диапазона экстраполируются: normalize(min) == 0.0,
        normalize(max) == 1.0, но normalize(2 * max) для линейной 0..max == 2.0.

        Args:
            value: Значение в домене шкалы

        Returns:
            Позиция (обычно в [0, 1])

        Raises:
            ScaleDomainError: value NaN/Inf; value <= 0 для LOGARITHMIC;
                переполнение 10**value для EXPONENTIAL
        """
        check_finite(value, "value")
        low, high = self._transformed_bounds()

        position = (self._forward(self.snap(value), "value") - low) / (high - low)
        if self.inverted:
            position = 1.0 - position

        position = inner_to_outer(self.breakpoints, position)
        return check_finite(position, "position")

    def denormalize(self, position: float) -> float:
        """
        Относительная позиция → абсолютное значение (обратное к normalize).

        Args:
            position: Позиция (обычно в [0, 1], экстраполяция допускается)

        Returns:
            Значение в домене шкалы

        Raises:
            ScaleDomainError: position NaN/Inf; результат не представим
                (переполнение, или неположительный аргумент log10 у EXPONENTIAL)
        """
        check_finite(position, "position")
        low, high = self._transformed_bounds()

        inner = outer_to_inner(self.breakpoints, position)
        if self.inverted:
            inner = 1.0 - inner

        value = self._inverse(lerp(low, high, inner))
        return self.snap(check_finite(value, "value"))

    def normalize_clamped(self, value: float) -> float:
        """normalize с предварительной обрезкой value до [lower, upper]."""
        return self.normalize(clamp(value, self.lower, self.upper))

    def denormalize_clamped(self, position: float) -> float:
        """denormalize с предварительной обрезкой position до [0, 1]."""
        return self.denormalize(clamp(position, 0.0, 1.0))

    # =========================================================================
    # DELTAS
    # =========================================================================

    def position_delta(self, value_delta: float, position: float) -> float:
        """
        Изменение позиции при сдвиге значения.

        Args:
            value_delta: Сдвиг абсолютного значения
            position: Исходная позиция

        Returns:
            normalize(denormalize(position) + value_delta) - position
        """
        value = self.denormalize(position)
        return self.normalize(value + value_delta) - position

    def value_delta(self, position_delta: float, value: float) -> float:
        """
        Изменение значения при сдвиге позиции.

        Args:
            position_delta: Сдвиг позиции
            value: Исходное абсолютное значение

        Returns:
            denormalize(normalize(value) + position_delta) - value
        """
        position = self.normalize(value)
        return self.denormalize(position + position_delta) - value

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def convert(self, value: float, other: "Scale") -> float:
        """
        Конверсия значения этой шкалы в значение шкалы other.

        Для идентичных шкал значение возвращается без изменений (после
        доменной проверки и растеризации), без ошибки округления.

        Raises:
            ScaleDomainError: из normalize/denormalize, без обёртки
        """
        position = self.normalize(value)
        if other == self:
            return float(self.snap(value))
        return other.denormalize(position)
