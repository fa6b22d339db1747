"""
Тесты для модуля fps_approx_ops

Проверяет:
1. Операторы eq/ne/lt/gt/le/ge поверх is_approx_equal / is_approx_less
2. Равенство диапазонов
3. Целочисленное деление частот с epsilon-поправкой
"""

import itertools

import pytest

from src.core.domain import Fps, FpsRange, FpsRanges, fps_approx_ops, hz

SAMPLES = [Fps(), hz(24), hz(59.9995), hz(60), hz(60.0005), hz(60.002), hz(90), hz(120)]


# =============================================================================
# ТЕСТЫ ОПЕРАТОРОВ FPS
# =============================================================================


class TestScalarOperators:
    """Тесты для операторов сравнения Fps"""

    def test_within_tolerance(self) -> None:
        a, b = hz(60), hz(60.0005)
        assert fps_approx_ops.eq(a, b)
        assert not fps_approx_ops.ne(a, b)
        assert not fps_approx_ops.lt(a, b)
        assert not fps_approx_ops.gt(a, b)
        assert fps_approx_ops.le(a, b)
        assert fps_approx_ops.ge(a, b)

    def test_outside_tolerance(self) -> None:
        a, b = hz(60), hz(90)
        assert not fps_approx_ops.eq(a, b)
        assert fps_approx_ops.ne(a, b)
        assert fps_approx_ops.lt(a, b)
        assert not fps_approx_ops.gt(a, b)
        assert fps_approx_ops.le(a, b)
        assert not fps_approx_ops.ge(a, b)

    @pytest.mark.parametrize("lhs,rhs", list(itertools.product(SAMPLES, repeat=2)))
    def test_operator_relations(self, lhs: Fps, rhs: Fps) -> None:
        """Производные операторы согласованы с lt и eq"""
        assert fps_approx_ops.gt(lhs, rhs) == fps_approx_ops.lt(rhs, lhs)
        assert fps_approx_ops.le(lhs, rhs) == (
            fps_approx_ops.lt(lhs, rhs) or fps_approx_ops.eq(lhs, rhs)
        )
        assert fps_approx_ops.ge(lhs, rhs) == fps_approx_ops.le(rhs, lhs)
        assert fps_approx_ops.ne(lhs, rhs) == (not fps_approx_ops.eq(lhs, rhs))

    def test_le_not_transitive_with_eq_chain(self) -> None:
        """le(a, b) и le(b, c) при gt(a, c) возможны из-за нетранзитивности"""
        a, b, c = hz(60.0018), hz(60.0009), hz(60.0)
        assert fps_approx_ops.le(a, b)
        assert fps_approx_ops.le(b, c)
        assert fps_approx_ops.gt(a, c)


# =============================================================================
# ТЕСТЫ РАВЕНСТВА ДИАПАЗОНОВ
# =============================================================================


class TestRangeOperators:
    """Тесты для range_eq / ranges_eq"""

    def test_range_eq_within_tolerance(self) -> None:
        lhs = FpsRange(min=hz(24), max=hz(60))
        rhs = FpsRange(min=hz(24.0005), max=hz(59.9995))
        assert fps_approx_ops.range_eq(lhs, rhs)
        assert not fps_approx_ops.range_ne(lhs, rhs)

    def test_range_ne(self) -> None:
        lhs = FpsRange(min=hz(24), max=hz(60))
        rhs = FpsRange(min=hz(24), max=hz(90))
        assert fps_approx_ops.range_ne(lhs, rhs)

    def test_ranges_eq(self) -> None:
        lhs = FpsRanges(
            physical=FpsRange(min=hz(0), max=hz(90)),
            render=FpsRange(min=hz(0), max=hz(60)),
        )
        rhs = FpsRanges(
            physical=FpsRange(min=hz(0), max=hz(90.0002)),
            render=FpsRange(min=hz(0), max=hz(60)),
        )
        assert fps_approx_ops.ranges_eq(lhs, rhs)
        assert not fps_approx_ops.ranges_ne(lhs, rhs)

    def test_ranges_ne_on_render(self) -> None:
        lhs = FpsRanges(render=FpsRange(min=hz(0), max=hz(60)))
        rhs = FpsRanges(render=FpsRange(min=hz(0), max=hz(30)))
        assert fps_approx_ops.ranges_ne(lhs, rhs)


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ ЧАСТОТ
# =============================================================================


class TestDivide:
    """Тесты для fps_approx_ops.divide"""

    def test_integer_ratio(self) -> None:
        assert fps_approx_ops.divide(hz(120), hz(60)) == 2
        assert fps_approx_ops.divide(hz(60), hz(60)) == 1
        assert fps_approx_ops.divide(hz(120), hz(30)) == 4

    def test_fractional_ratio_ceils(self) -> None:
        """90 / 60 = 1.5 → 2"""
        assert fps_approx_ops.divide(hz(90), hz(60)) == 2
        assert fps_approx_ops.divide(hz(60), hz(120)) == 1

    def test_near_integer_ratio_not_rounded_up(self) -> None:
        """Погрешность периода не превращает отношение 2 в 3"""
        rate = Fps.from_period(8_333_333)
        assert rate.value() / hz(60).value() > 2.0
        assert fps_approx_ops.divide(rate, hz(60)) == 2

    def test_returns_int(self) -> None:
        assert isinstance(fps_approx_ops.divide(hz(120), hz(60)), int)

    def test_invalid_divisor_returns_zero(self) -> None:
        assert fps_approx_ops.divide(hz(60), Fps()) == 0

    def test_invalid_dividend_returns_zero(self) -> None:
        assert fps_approx_ops.divide(Fps(), hz(60)) == 0
