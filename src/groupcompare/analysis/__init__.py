# src/groupcompare/analysis/__init__.py

from .summaries import (
    box_summary,
    summarise_boxes,
    describe_groups,
)

from .transforms import (
    stack_transforms,
)

__all__ = [
    "box_summary",
    "summarise_boxes",
    "describe_groups",
    "stack_transforms",
]
