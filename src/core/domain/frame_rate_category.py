"""FrameRateCategory — Категория частоты кадров поверхности (layer).

Закрытый упорядоченный набор: DEFAULT < NO_PREFERENCE < LOW < NORMAL < HIGH_HINT < HIGH.
Числовые значения задают только относительный порядок для политики выбора частоты.
"""

from enum import IntEnum


class FrameRateCategory(IntEnum):
    """Категория частоты кадров"""

    DEFAULT = 0
    NO_PREFERENCE = 1
    LOW = 2
    NORMAL = 3
    HIGH_HINT = 4
    HIGH = 5
