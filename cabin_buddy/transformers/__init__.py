"""Data transformation package."""

from cabin_buddy.transformers.selection_period_transformer import (
    SelectionPeriodTransformer,
)

__all__ = [
    "SelectionPeriodTransformer",
]
