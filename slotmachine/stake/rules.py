"""Stake Rules — индивидуальные правила допуска ставки.

Каждое правило получает StakeContext (ставка + текущий баланс) и
возвращает сообщение об ошибке или None (PASS).

- PositiveStakeRule: stake > 0
- MinimumStakeRule: stake >= min_stake
- MaximumStakeRule: stake <= max_stake
- WithinBalanceRule: stake <= balance
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from slotmachine.core.math.money import ZERO


# =============================================================================
# CONTEXT
# =============================================================================


@dataclass(frozen=True)
class StakeContext:
    """Контекст валидации ставки."""

    stake: Decimal
    current_balance: Decimal


# =============================================================================
# RULES
# =============================================================================


class StakeRule(ABC):
    """Базовый класс правила ставки."""

    name: str = "stake_rule"

    @abstractmethod
    def check(self, context: StakeContext) -> Optional[str]:
        """Сообщение об ошибке или None, если ставка допустима."""


class PositiveStakeRule(StakeRule):
    name = "positive_stake"

    def check(self, context: StakeContext) -> Optional[str]:
        if context.stake <= ZERO:
            return "Stake amount must be greater than 0."
        return None


class MinimumStakeRule(StakeRule):
    name = "minimum_stake"

    def __init__(self, min_stake: Decimal):
        self.min_stake = min_stake

    def check(self, context: StakeContext) -> Optional[str]:
        # Неположительная ставка — зона PositiveStakeRule
        if ZERO < context.stake < self.min_stake:
            return f"Stake amount must be at least {self.min_stake:.2f}."
        return None


class MaximumStakeRule(StakeRule):
    name = "maximum_stake"

    def __init__(self, max_stake: Decimal):
        self.max_stake = max_stake

    def check(self, context: StakeContext) -> Optional[str]:
        if context.stake > self.max_stake:
            return f"Stake amount must not exceed {self.max_stake:.2f}."
        return None


class WithinBalanceRule(StakeRule):
    name = "within_balance"

    def check(self, context: StakeContext) -> Optional[str]:
        if context.stake > context.current_balance:
            return (
                f"Stake amount {context.stake:.2f} exceeds your balance "
                f"{context.current_balance:.2f}."
            )
        return None
