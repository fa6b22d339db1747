"""
fps_approx_ops — Приблизительные операторы сравнения Fps

Явный opt-in для сравнений с толерантностью 0.001 Hz. Встроенные операторы
Fps остаются точными, чтобы толерантность не подмешивалась незаметно:

    from src.core.domain import fps_approx_ops as approx

    if approx.le(range_min, fps) and approx.le(fps, range_max):
        ...

Операторы построены из is_approx_equal / is_approx_less и наследуют их
свойства: равенство не транзитивно, "меньше" не является strict weak order.
"""

from typing import TYPE_CHECKING

from src.core.domain.fps import (
    FPS_DIVIDE_EPS,
    Fps,
    is_approx_equal,
    is_approx_less,
)
from src.core.math.numerical_safeguards import ceil_with_epsilon

if TYPE_CHECKING:
    from src.core.domain.fps_range import FpsRange, FpsRanges


# =============================================================================
# ОПЕРАТОРЫ FPS
# =============================================================================


def eq(lhs: Fps, rhs: Fps) -> bool:
    return is_approx_equal(lhs, rhs)


def ne(lhs: Fps, rhs: Fps) -> bool:
    return not is_approx_equal(lhs, rhs)


def lt(lhs: Fps, rhs: Fps) -> bool:
    return is_approx_less(lhs, rhs)


def gt(lhs: Fps, rhs: Fps) -> bool:
    return is_approx_less(rhs, lhs)


def le(lhs: Fps, rhs: Fps) -> bool:
    return not is_approx_less(rhs, lhs)


def ge(lhs: Fps, rhs: Fps) -> bool:
    return not is_approx_less(lhs, rhs)


# =============================================================================
# ОПЕРАТОРЫ ДИАПАЗОНОВ
# =============================================================================


def range_eq(lhs: "FpsRange", rhs: "FpsRange") -> bool:
    """Покомпонентное приблизительное равенство min и max."""
    return is_approx_equal(lhs.min, rhs.min) and is_approx_equal(lhs.max, rhs.max)


def range_ne(lhs: "FpsRange", rhs: "FpsRange") -> bool:
    return not range_eq(lhs, rhs)


def ranges_eq(lhs: "FpsRanges", rhs: "FpsRanges") -> bool:
    return range_eq(lhs.physical, rhs.physical) and range_eq(lhs.render, rhs.render)


def ranges_ne(lhs: "FpsRanges", rhs: "FpsRanges") -> bool:
    return not ranges_eq(lhs, rhs)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(lhs: Fps, rhs: Fps) -> int:
    """
    Сколько периодов rhs укладывается в один период lhs.

    ceil(lhs / rhs - 1e-5): почти целые отношения (2.000000001) не
    округляются вверх до следующего целого.

    Args:
        lhs: Делимая частота
        rhs: Частота-делитель

    Returns:
        Целое отношение; 0 если rhs невалидна

    Examples:
        >>> divide(hz(120), hz(60))
        2
        >>> divide(hz(90), hz(60))
        2
    """
    if not rhs.is_valid():
        return 0
    return ceil_with_epsilon(lhs.value() / rhs.value(), FPS_DIVIDE_EPS)
