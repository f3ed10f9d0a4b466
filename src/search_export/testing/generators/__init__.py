"""Testing generators – property-based strategies."""
from search_export.testing.generators.strategies import (
    date_math_strategy,
    past_time_range_strategy,
    relative_offset_strategy,
)

__all__ = ["date_math_strategy", "past_time_range_strategy", "relative_offset_strategy"]
