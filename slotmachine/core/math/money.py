"""
Money — денежная арифметика баланса и ставок

Единственный допустимый способ получить денежную величину (баланс, ставку,
выигрыш) в сессии игрового автомата.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все денежные величины — Decimal, никогда не float
2. Округление до 2 знаков после КАЖДОГО арифметического шага
3. Округление банковское (ROUND_HALF_EVEN)
4. NaN/Inf никогда не попадают в баланс
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Квант денежной величины (2 знака после запятой)
MONEY_QUANT: Final[Decimal] = Decimal("0.01")

# Нулевой баланс (граница game over)
ZERO: Final[Decimal] = Decimal("0.00")

MoneyLike = Union[Decimal, int, float, str]


# =============================================================================
# КОНВЕРСИЯ И ОКРУГЛЕНИЕ
# =============================================================================


def to_money(value: MoneyLike) -> Decimal:
    """
    Конверсия произвольного числа в денежную величину (2 знака).

    float конвертируется через str, чтобы 0.1 оставался 0.10,
    а не 0.1000000000000000055511151231257827.

    Args:
        value: Число (Decimal, int, float или строка)

    Returns:
        Decimal, округлённый до MONEY_QUANT

    Raises:
        ValueError: Если значение не является конечным числом
    """
    if isinstance(value, bool):
        raise ValueError(f"Money amount cannot be a boolean: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a money amount: {value!r}") from None

    return round_money(amount)


def round_money(amount: Decimal) -> Decimal:
    """
    Округление до 2 знаков после запятой (ROUND_HALF_EVEN).

    Операция идемпотентна: round_money(round_money(x)) == round_money(x).

    Args:
        amount: Decimal величина

    Returns:
        Округлённая величина

    Raises:
        ValueError: Если amount — NaN, бесконечность или слишком велико
            для 2 знаков в точности контекста decimal

    Examples:
        >>> round_money(Decimal("10.005"))
        Decimal('10.00')
        >>> round_money(Decimal("10.015"))
        Decimal('10.02')
    """
    if not amount.is_finite():
        raise ValueError(f"Money amount must be finite, got {amount}")

    try:
        return amount.quantize(MONEY_QUANT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise ValueError(f"Money amount out of range: {amount}") from None


# =============================================================================
# ОБНОВЛЕНИЕ БАЛАНСА
# =============================================================================


def settle_balance(balance: Decimal, stake: Decimal, win_amount: Decimal) -> Decimal:
    """
    Расчёт баланса после раунда.

    balance_new = round(balance - stake + win_amount, 2)

    Промежуточный результат округляется после каждого шага, что
    эквивалентно однократному округлению для 2-значных входов.

    Args:
        balance: Баланс до раунда
        stake: Принятая ставка раунда
        win_amount: Выигрыш раунда (0 при проигрыше)

    Returns:
        Новый баланс (2 знака)
    """
    after_stake = round_money(balance - stake)
    return round_money(after_stake + win_amount)


def is_exhausted(balance: Decimal) -> bool:
    """True если баланс исчерпан (balance <= 0) — сессия завершается."""
    return balance <= ZERO
