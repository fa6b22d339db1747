"""
Numerical Safeguards — примитивы округления и сравнения float

Модуль обеспечивает численную устойчивость конверсий частота ↔ период:
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Округление "half away from zero" (семантика C round, а не banker's rounding)
- Сравнение с абсолютной толерантностью (строгое неравенство)
- Ceil с epsilon-поправкой для почти целых отношений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не выбрасывает исключений на числовых входах
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(60.0)
        60.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половины — от нуля.

    Встроенный round() использует banker's rounding (round(2.5) == 2),
    здесь нужна семантика C round: 2.5 → 3, -2.5 → -3.

    Args:
        value: Конечное значение float

    Returns:
        Ближайшее целое

    Examples:
        >>> round_half_away_from_zero(16666666.67)
        16666667
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return int(math.ceil(value - 0.5))


def ceil_with_epsilon(value: float, eps: float, fallback: int = 0) -> int:
    """
    Ceil с вычитанием epsilon перед округлением.

    Поглощает ошибку float у почти целых значений: 2.000000001 → 2, а не 3.

    Args:
        value: Исходное значение
        eps: Поправка, вычитаемая перед ceil
        fallback: Результат для NaN/Inf (default: 0)

    Returns:
        ceil(value - eps) или fallback

    Examples:
        >>> ceil_with_epsilon(2.000000001, 1e-5)
        2
        >>> ceil_with_epsilon(1.5, 1e-5)
        2
    """
    if not is_valid_float(value):
        return fallback
    return int(math.ceil(value - eps))


# =============================================================================
# СРАВНЕНИЯ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_within_tolerance(a: float, b: float, tol: float) -> bool:
    """
    Абсолютное сравнение float: abs(a - b) < tol.

    Неравенство строгое: разница ровно tol считается различием.
    Отношение не транзитивно.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность

    Returns:
        True если значения отличаются меньше чем на tol
    """
    return abs(a - b) < tol
