"""
Domain models and value objects.

Frame rate value types: Fps, FpsRange, FpsRanges, FrameRateCategory.
Approximate comparisons live in the explicit fps_approx_ops module.
"""

from src.core.domain.time import Duration, Period
from src.core.domain.fps import (
    FPS_APPROX_TOLERANCE_HZ,
    FPS_DIVIDE_EPS,
    FPS_MAX_VALUE,
    NS_PER_SEC,
    Fps,
    FpsApproxEqual,
    divide,
    group_approx_equal,
    hz,
    is_approx_equal,
    is_approx_less,
    is_strictly_less,
)
from src.core.domain import fps_approx_ops
from src.core.domain.fps_range import FpsRange, FpsRanges
from src.core.domain.frame_rate_category import FrameRateCategory
from src.core.domain.formatting import to_string

__all__ = [
    # Time
    "Duration",
    "Period",
    # Constants
    "NS_PER_SEC",
    "FPS_APPROX_TOLERANCE_HZ",
    "FPS_DIVIDE_EPS",
    "FPS_MAX_VALUE",
    # Fps model
    "Fps",
    "hz",
    "divide",
    # Comparisons
    "is_strictly_less",
    "is_approx_equal",
    "is_approx_less",
    "FpsApproxEqual",
    "group_approx_equal",
    "fps_approx_ops",
    # Ranges
    "FpsRange",
    "FpsRanges",
    # Category
    "FrameRateCategory",
    # Formatting
    "to_string",
]
