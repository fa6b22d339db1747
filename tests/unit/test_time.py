"""
Тесты для Duration
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.core.domain import Duration, Fps, Period


class TestDuration:
    """Тесты для Duration"""

    def test_default_is_zero(self) -> None:
        assert Duration().ns == 0

    def test_from_ns(self) -> None:
        assert Duration.from_ns(16_666_667).ns == 16_666_667

    def test_to_seconds(self) -> None:
        assert Duration.from_ns(16_666_667).to_seconds() == pytest.approx(0.016666667)
        assert Duration.from_ns(1_000_000_000).to_seconds() == 1.0

    def test_to_timedelta_truncates_to_microseconds(self) -> None:
        assert Duration.from_ns(16_666_667).to_timedelta() == timedelta(microseconds=16_666)

    def test_immutable(self) -> None:
        """Duration должен быть immutable (frozen=True)"""
        duration = Duration.from_ns(1)
        with pytest.raises(ValidationError):
            duration.ns = 2  # type: ignore

    def test_value_equality(self) -> None:
        assert Duration.from_ns(5) == Duration.from_ns(5)
        assert Duration.from_ns(5) != Duration.from_ns(6)

    def test_period_alias(self) -> None:
        assert Period is Duration

    def test_fps_period_accessor(self) -> None:
        """Fps.period() возвращает Duration с тем же числом наносекунд"""
        fps = Fps.from_value(60.0)
        assert fps.period() == Duration.from_ns(16_666_667)
        assert Fps.from_period(fps.period()) == Fps.from_period(16_666_667)
