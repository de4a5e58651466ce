"""Stake — правила и валидатор допуска ставки раунда."""

from .rules import (
    MaximumStakeRule,
    MinimumStakeRule,
    PositiveStakeRule,
    StakeContext,
    StakeRule,
    WithinBalanceRule,
)
from .validator import StakeValidationResult, StakeValidator, StakeValidatorConfig

__all__ = [
    "StakeContext",
    "StakeRule",
    "PositiveStakeRule",
    "MinimumStakeRule",
    "MaximumStakeRule",
    "WithinBalanceRule",
    "StakeValidator",
    "StakeValidatorConfig",
    "StakeValidationResult",
]
