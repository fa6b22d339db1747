"""
Сериализация частот и диапазонов в dict и обратно

Формат dict: model_dump() моделей, проверяется контрактом (validators.py).
Значения восстанавливаются только через фабрики Fps:
- согласованная пара (frequency == 1e9 / period_ns) восстанавливается через
  from_period, целый период сохраняется точно при любой величине;
- иначе источник истины частота (from_value), а расхождение с сохранённым
  period_ns логируется.
"""

import logging
from typing import Any, Dict

from src.core.contracts.validators import validate_contract
from src.core.domain.fps import Fps
from src.core.domain.fps_range import FpsRange, FpsRanges

logger = logging.getLogger(__name__)


# =============================================================================
# FPS
# =============================================================================


def fps_to_dict(fps: Fps) -> Dict[str, Any]:
    return fps.model_dump()


def _fps_from_validated(data: Dict[str, Any]) -> Fps:
    from_period = Fps.from_period(data["period_ns"])
    if from_period.is_valid() and from_period.value() == data["frequency"]:
        return from_period

    fps = Fps.from_value(data["frequency"])
    if fps.period_nanos() != data["period_ns"]:
        logger.warning(
            "period_ns mismatch for %s: stored %d, recomputed %d",
            fps,
            data["period_ns"],
            fps.period_nanos(),
        )
    return fps


def fps_from_dict(data: Dict[str, Any]) -> Fps:
    """
    Восстановление Fps из dict.

    Args:
        data: {"frequency": float, "period_ns": int}

    Returns:
        Fps, построенный через from_period или from_value

    Raises:
        ValidationError: Если данные не соответствуют контракту Fps
    """
    validate_contract(Fps, data)
    return _fps_from_validated(data)


# =============================================================================
# FPS RANGE
# =============================================================================


def fps_range_to_dict(fps_range: FpsRange) -> Dict[str, Any]:
    return fps_range.model_dump()


def _fps_range_from_validated(data: Dict[str, Any]) -> FpsRange:
    return FpsRange(
        min=_fps_from_validated(data["min"]),
        max=_fps_from_validated(data["max"]),
    )


def fps_range_from_dict(data: Dict[str, Any]) -> FpsRange:
    """
    Восстановление FpsRange из dict.

    Raises:
        ValidationError: Если данные не соответствуют контракту FpsRange
    """
    validate_contract(FpsRange, data)
    return _fps_range_from_validated(data)


# =============================================================================
# FPS RANGES
# =============================================================================


def fps_ranges_to_dict(fps_ranges: FpsRanges) -> Dict[str, Any]:
    return fps_ranges.model_dump()


def fps_ranges_from_dict(data: Dict[str, Any]) -> FpsRanges:
    """
    Восстановление FpsRanges из dict.

    Raises:
        ValidationError: Если данные не соответствуют контракту FpsRanges
    """
    validate_contract(FpsRanges, data)
    return FpsRanges(
        physical=_fps_range_from_validated(data["physical"]),
        render=_fps_range_from_validated(data["render"]),
    )
