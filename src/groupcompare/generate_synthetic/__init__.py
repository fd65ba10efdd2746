# src/groupcompare/generate_synthetic/__init__.py

from .synthetic_data import (
    DEFAULT_GROUP_SPEC,
    simulate_groups,
)

__all__ = [
    "DEFAULT_GROUP_SPEC",
    "simulate_groups",
]
