"""
FpsRange / FpsRanges — Замкнутые диапазоны частот

FpsRange: [min, max] с границами включительно, сравнение с толерантностью.
Порядок min <= max не проверяется: вызывающий код может временно строить
"перевёрнутые" диапазоны.

FpsRanges: пара диапазонов режима дисплея:
- physical — частоты обновления, на которых может работать режим
- render — частоты смены кадров, допустимые внутри режима

Согласованность (physical.max >= render.max) — предикат valid(), а не
ограничение при создании.
"""

from typing import Union

from pydantic import BaseModel, Field

from src.core.domain import fps_approx_ops
from src.core.domain.fps import FPS_MAX_VALUE, Fps


# =============================================================================
# FPS RANGE
# =============================================================================


class FpsRange(BaseModel):
    """
    Замкнутый диапазон частот.

    По умолчанию [0 Hz, FPS_MAX_VALUE]. Оператор == приблизительный
    (покомпонентно с толерантностью 0.001 Hz), поэтому экземпляры не хешируются.
    """

    min: Fps = Field(default_factory=lambda: Fps.from_value(0.0), description="Нижняя граница")
    max: Fps = Field(
        default_factory=lambda: Fps.from_value(FPS_MAX_VALUE), description="Верхняя граница"
    )

    model_config = {"frozen": True}

    __hash__ = None  # type: ignore[assignment]

    def includes(self, other: Union[Fps, "FpsRange"]) -> bool:
        """
        Проверка вхождения частоты или поддиапазона.

        Args:
            other: Частота (min <= other <= max) или диапазон
                (min <= other.min и max >= other.max)

        Returns:
            True если other входит в диапазон с учётом толерантности
        """
        if isinstance(other, FpsRange):
            return fps_approx_ops.le(self.min, other.min) and fps_approx_ops.ge(
                self.max, other.max
            )
        if isinstance(other, Fps):
            return fps_approx_ops.le(self.min, other) and fps_approx_ops.le(other, self.max)
        raise TypeError(f"Expected Fps or FpsRange, got {type(other).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FpsRange):
            return NotImplemented
        return fps_approx_ops.range_eq(self, other)

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"


# =============================================================================
# FPS RANGES
# =============================================================================


class FpsRanges(BaseModel):
    """Физический диапазон и диапазон рендера режима дисплея."""

    physical: FpsRange = Field(
        default_factory=FpsRange, description="Частоты обновления режима дисплея"
    )
    render: FpsRange = Field(
        default_factory=FpsRange, description="Частоты смены кадров (render rate)"
    )

    model_config = {"frozen": True}

    __hash__ = None  # type: ignore[assignment]

    def valid(self) -> bool:
        """physical.max >= render.max (приблизительно)."""
        return fps_approx_ops.ge(self.physical.max, self.render.max)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FpsRanges):
            return NotImplemented
        return fps_approx_ops.ranges_eq(self, other)

    def __str__(self) -> str:
        return f"{{physical={self.physical}, render={self.render}}}"
