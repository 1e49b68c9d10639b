"""
Core math modules для scale-converter

Математические примитивы преобразования шкал с доменными проверками.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    lerp,
    round_to_step,
)

# Transforms
from src.core.math.transforms import (
    ScaleDomainError,
    check_finite,
    safe_log10,
    safe_pow10,
)

# Piecewise (broken scales)
from src.core.math.piecewise import (
    Breakpoint,
    inner_to_outer,
    outer_to_inner,
    validate_breakpoints,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "is_valid_float",
    "lerp",
    "round_to_step",
    # Transforms — Exceptions
    "ScaleDomainError",
    # Transforms — Functions
    "check_finite",
    "safe_log10",
    "safe_pow10",
    # Piecewise — Types
    "Breakpoint",
    # Piecewise — Functions
    "inner_to_outer",
    "outer_to_inner",
    "validate_breakpoints",
]
