"""
Fps — Частота кадров / обновления дисплея

Частота хранится как float (Hz) вместе с производным периодом в целых
наносекундах. Ровно одно из полей является источником истины при создании:
- Fps.from_value(f): period_ns = round(1e9 / f)
- Fps.from_period(p): frequency = 1e9 / p

Неположительный вход не отклоняется, а нормализуется в невалидное значение
(frequency = 0, period_ns = 0, is_valid() == False).

    fps = hz(60)
    assert fps_approx_ops.eq(fps, Fps.from_period(16_666_667))

Встроенное == у Fps точное (сравнение полей). Сравнения с толерантностью
доступны только явно: is_approx_equal / is_approx_less и модуль fps_approx_ops.
"""

import sys
from typing import Callable, Final, Iterable, List, Union

from pydantic import BaseModel, Field

from src.core.domain.time import Duration
from src.core.math.numerical_safeguards import (
    is_valid_float,
    is_within_tolerance,
    round_half_away_from_zero,
    sanitize_float,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NS_PER_SEC: Final[int] = 1_000_000_000

# Полоса приблизительного равенства частот (Hz)
FPS_APPROX_TOLERANCE_HZ: Final[float] = 1e-3

# Поправка перед ceil при делении частот
FPS_DIVIDE_EPS: Final[float] = 1e-5

# Наибольшее представимое значение частоты
FPS_MAX_VALUE: Final[float] = sys.float_info.max


# =============================================================================
# FPS MODEL
# =============================================================================


class Fps(BaseModel):
    """
    Частота в Hz и её период в наносекундах.

    Immutable модель (frozen=True). Экземпляр по умолчанию невалиден.
    Создавать значения следует только через from_value / from_period:
    прямое присваивание полей не гарантирует их согласованность.
    """

    frequency: float = Field(default=0.0, ge=0.0, description="Частота (Hz)")
    period_ns: int = Field(default=0, ge=0, description="Период (наносекунды)")

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, frequency: float) -> "Fps":
        """
        Создание из частоты.

        Args:
            frequency: Частота в Hz

        Returns:
            Fps с period_ns = round(1e9 / frequency), либо невалидное
            значение, если frequency <= 0, не конечна или период не
            представим конечным float (frequency меньше ~1e-299 Hz)
        """
        frequency = sanitize_float(float(frequency), fallback=0.0)
        if frequency > 0.0:
            period = NS_PER_SEC / frequency
            if is_valid_float(period):
                return cls(frequency=frequency, period_ns=round_half_away_from_zero(period))
        return cls()

    @classmethod
    def from_period(cls, period: Union[int, Duration]) -> "Fps":
        """
        Создание из периода.

        Обратная конверсия from_value(f).period_nanos() → from_period в общем
        случае не возвращает исходную f: прямая конверсия округляет до целых
        наносекунд.

        Args:
            period: Период в наносекундах или Duration

        Returns:
            Fps с frequency = 1e9 / period, либо невалидное значение,
            если period <= 0
        """
        period_ns = period.ns if isinstance(period, Duration) else int(period)
        if period_ns > 0:
            return cls(frequency=NS_PER_SEC / period_ns, period_ns=period_ns)
        return cls()

    def is_valid(self) -> bool:
        return self.frequency > 0.0

    def value(self) -> float:
        return self.frequency

    def int_value(self) -> int:
        """Частота, округлённая до ближайшего целого Hz."""
        return round_half_away_from_zero(self.frequency)

    def period(self) -> Duration:
        return Duration.from_ns(self.period_ns)

    def period_nanos(self) -> int:
        return self.period_ns

    def __truediv__(self, divisor: int) -> "Fps":
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        return divide(self, divisor)

    def __str__(self) -> str:
        return f"{self.frequency:.2f} Hz"


def hz(value: Union[int, float]) -> Fps:
    """
    Конструктор из числового литерала: hz(60), hz(59.94).

    Args:
        value: Частота в Hz (int или float)

    Returns:
        Fps.from_value(value)
    """
    return Fps.from_value(float(value))


def divide(fps: Fps, divisor: int) -> Fps:
    """
    Деление частоты на целое число.

    Реализовано как умножение периода, чтобы сохранить точность целых
    наносекунд: hz(60) / 2 == Fps.from_period(16_666_667 * 2).

    Args:
        fps: Исходная частота
        divisor: Положительный целый делитель

    Returns:
        Fps.from_period(fps.period_nanos() * divisor); невалидное значение
        при divisor <= 0
    """
    return Fps.from_period(fps.period_nanos() * divisor)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_strictly_less(lhs: Fps, rhs: Fps) -> bool:
    """Точное сравнение: lhs.value() < rhs.value()."""
    return lhs.value() < rhs.value()


def is_approx_equal(lhs: Fps, rhs: Fps) -> bool:
    """
    Приблизительное равенство: |lhs - rhs| < 0.001 Hz.

    Не является отношением эквивалентности: рефлексивно и симметрично, но не
    транзитивно (60.0 ≈ 60.0009 ≈ 60.0018, но 60.0 ≉ 60.0018).
    """
    # TODO: заменить абсолютную толерантность на расстояние в ULP
    return is_within_tolerance(lhs.value(), rhs.value(), FPS_APPROX_TOLERANCE_HZ)


def is_approx_less(lhs: Fps, rhs: Fps) -> bool:
    """
    Приблизительное "меньше": строго меньше и не приблизительно равно.

    Не является strict weak order (следствие нетранзитивного равенства).
    """
    return is_strictly_less(lhs, rhs) and not is_approx_equal(lhs, rhs)


class FpsApproxEqual:
    """
    Предикат приблизительного равенства для поиска и группировки.

    ВНИМАНИЕ: отношение не транзитивно. При использовании как ключа
    эквивалентности принадлежность к группе зависит от порядка обхода.
    Это известная ограниченная неточность, а не дефект.
    """

    def __call__(self, lhs: Fps, rhs: Fps) -> bool:
        return is_approx_equal(lhs, rhs)


def group_approx_equal(
    values: Iterable[Fps],
    eq: Callable[[Fps, Fps], bool] = FpsApproxEqual(),
) -> List[List[Fps]]:
    """
    Группировка частот по приблизительному равенству.

    Каждое значение попадает в первую группу, чей представитель (первый
    элемент) равен ему по eq, иначе открывает новую группу.

    Args:
        values: Частоты в порядке обхода
        eq: Предикат равенства (default: FpsApproxEqual)

    Returns:
        Список групп в порядке их появления
    """
    groups: List[List[Fps]] = []
    for fps in values:
        for group in groups:
            if eq(group[0], fps):
                group.append(fps)
                break
        else:
            groups.append([fps])
    return groups
