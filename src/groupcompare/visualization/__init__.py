# src/groupcompare/visualization/__init__.py

from .boxplots import GroupedComparisonPlotter, make_group_boxplot

__all__ = [
    "GroupedComparisonPlotter",
    "make_group_boxplot",
]
