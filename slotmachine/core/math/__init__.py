"""
Money arithmetic — округление и расчёт баланса.
"""

from slotmachine.core.math.money import (
    MONEY_QUANT,
    ZERO,
    is_exhausted,
    round_money,
    settle_balance,
    to_money,
)

__all__ = [
    "MONEY_QUANT",
    "ZERO",
    "to_money",
    "round_money",
    "settle_balance",
    "is_exhausted",
]
