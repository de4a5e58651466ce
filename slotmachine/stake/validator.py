"""Stake Validator — агрегирование правил допуска ставки.

В отличие от fail-fast проверок, собирает сообщения ВСЕХ нарушенных
правил, чтобы игрок увидел их разом перед повторным вводом.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from slotmachine.core.math.money import MONEY_QUANT

from .rules import (
    MaximumStakeRule,
    MinimumStakeRule,
    PositiveStakeRule,
    StakeContext,
    StakeRule,
    WithinBalanceRule,
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class StakeValidationResult:
    """Результат валидации ставки."""

    is_valid: bool
    errors: Tuple[str, ...]
    failed_rules: Tuple[str, ...]

    @classmethod
    def passed(cls) -> "StakeValidationResult":
        return cls(is_valid=True, errors=(), failed_rules=())


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class StakeValidatorConfig:
    """Конфигурация стандартного набора правил."""

    min_stake: Decimal = MONEY_QUANT
    max_stake: Optional[Decimal] = None


# =============================================================================
# VALIDATOR
# =============================================================================


class StakeValidator:
    """Валидатор ставки поверх подключаемого набора правил."""

    def __init__(self, rules: Iterable[StakeRule]):
        self.rules: Tuple[StakeRule, ...] = tuple(rules)

    @classmethod
    def from_config(cls, config: StakeValidatorConfig | None = None) -> "StakeValidator":
        """Стандартный набор: stake > 0, >= min, <= max (если задан), <= balance."""
        config = config or StakeValidatorConfig()

        rules: List[StakeRule] = [
            PositiveStakeRule(),
            MinimumStakeRule(config.min_stake),
        ]
        if config.max_stake is not None:
            rules.append(MaximumStakeRule(config.max_stake))
        rules.append(WithinBalanceRule())

        return cls(rules)

    def validate(self, context: StakeContext) -> StakeValidationResult:
        errors = []
        failed = []
        for rule in self.rules:
            message = rule.check(context)
            if message is not None:
                errors.append(message)
                failed.append(rule.name)

        if not errors:
            return StakeValidationResult.passed()

        return StakeValidationResult(
            is_valid=False,
            errors=tuple(errors),
            failed_rules=tuple(failed),
        )
