"""
Строковое представление частот и диапазонов

Форматы — контракт совместимости для логов и golden-тестов:
- Fps:       "60.00 Hz"
- FpsRange:  "[24.00 Hz, 60.00 Hz]"
- FpsRanges: "{physical=[0.00 Hz, 90.00 Hz], render=[0.00 Hz, 60.00 Hz]}"
"""

from typing import Union

from src.core.domain.fps import Fps
from src.core.domain.fps_range import FpsRange, FpsRanges


def to_string(value: Union[Fps, FpsRange, FpsRanges]) -> str:
    """
    Форматирование частоты или диапазона.

    Args:
        value: Fps, FpsRange или FpsRanges

    Returns:
        Строка в формате контракта

    Raises:
        TypeError: Для неподдерживаемых типов
    """
    if isinstance(value, (Fps, FpsRange, FpsRanges)):
        return str(value)
    raise TypeError(f"Cannot format {type(value).__name__} as frame rate")
