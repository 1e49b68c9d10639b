"""
Domain models and value objects.

Contains the Scale value object and its transform kinds.
"""

from src.core.domain.scale import Scale, ScaleKind

__all__ = [
    "Scale",
    "ScaleKind",
]
