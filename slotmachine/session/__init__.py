"""Session — раунды, баланс и состояние игровой сессии.

- Явный цикл по раундам (без рекурсии)
- State machine раунда с терминальным GAME_OVER
- Внешние коллабораторы через абстрактные ports
"""

from .controller import RoundResult, SessionOverError, SessionSummary, SlotMachineSession
from .ports import BalanceProvider, Display, InputReader
from .state_machine import (
    InvalidRoundTransitionError,
    RoundState,
    RoundStateMachine,
    RoundTransitionResult,
)

__all__ = [
    "SlotMachineSession",
    "RoundResult",
    "SessionSummary",
    "SessionOverError",
    "InputReader",
    "Display",
    "BalanceProvider",
    "RoundState",
    "RoundStateMachine",
    "RoundTransitionResult",
    "InvalidRoundTransitionError",
]
