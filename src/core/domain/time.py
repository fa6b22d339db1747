"""Duration — длительность с наносекундным разрешением.

Минимальное представление периода для Fps.period().
"""

from datetime import timedelta

from pydantic import BaseModel, Field


class Duration(BaseModel):
    """Длительность в наносекундах (immutable)."""

    ns: int = Field(default=0, description="Длительность в наносекундах")

    model_config = {"frozen": True}

    @classmethod
    def from_ns(cls, ns: int) -> "Duration":
        return cls(ns=int(ns))

    def to_seconds(self) -> float:
        return self.ns / 1e9

    def to_timedelta(self) -> timedelta:
        """Конверсия в timedelta (округление вниз до микросекунд)."""
        return timedelta(microseconds=self.ns // 1000)


# Период кадра
Period = Duration
