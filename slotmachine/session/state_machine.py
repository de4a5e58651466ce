"""Round State Machine — жизненный цикл раунда.

Переходы:
    AWAITING_STAKE → SPINNING → EVALUATING → BALANCE_UPDATED
    BALANCE_UPDATED → AWAITING_STAKE  (balance > 0)
    BALANCE_UPDATED → GAME_OVER       (balance <= 0, терминальное)
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, List

from slotmachine.core.math.money import is_exhausted


class RoundState(str, Enum):
    """Состояние раунда."""

    AWAITING_STAKE = "AWAITING_STAKE"
    SPINNING = "SPINNING"
    EVALUATING = "EVALUATING"
    BALANCE_UPDATED = "BALANCE_UPDATED"
    GAME_OVER = "GAME_OVER"


ALLOWED_TRANSITIONS: Dict[RoundState, FrozenSet[RoundState]] = {
    RoundState.AWAITING_STAKE: frozenset({RoundState.SPINNING}),
    RoundState.SPINNING: frozenset({RoundState.EVALUATING}),
    RoundState.EVALUATING: frozenset({RoundState.BALANCE_UPDATED}),
    RoundState.BALANCE_UPDATED: frozenset({RoundState.AWAITING_STAKE, RoundState.GAME_OVER}),
    RoundState.GAME_OVER: frozenset(),
}


class InvalidRoundTransitionError(ValueError):
    """Недопустимый переход состояния раунда."""

    def __init__(self, from_state: RoundState, to_state: RoundState):
        super().__init__(f"Illegal round transition: {from_state.value} → {to_state.value}")
        self.from_state = from_state
        self.to_state = to_state


@dataclass(frozen=True)
class RoundTransitionResult:
    """Результат перехода состояния раунда."""

    new_state: RoundState
    previous_state: RoundState
    transition_reason: str
    details: str


class RoundStateMachine:
    """State machine раунда.

    Хранит текущее состояние и историю переходов сессии.
    GAME_OVER — терминальное состояние, выхода из него нет.
    """

    def __init__(self, initial_state: RoundState = RoundState.AWAITING_STAKE):
        self._state = initial_state
        self._history: List[RoundTransitionResult] = []

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def history(self) -> List[RoundTransitionResult]:
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return self._state == RoundState.GAME_OVER

    def can_transition(self, to_state: RoundState) -> bool:
        return to_state in ALLOWED_TRANSITIONS[self._state]

    def transition(self, to_state: RoundState, reason: str, details: str = "") -> RoundTransitionResult:
        """Переход в to_state.

        Raises:
            InvalidRoundTransitionError: переход не разрешён из текущего состояния
        """
        if not self.can_transition(to_state):
            raise InvalidRoundTransitionError(self._state, to_state)

        result = RoundTransitionResult(
            new_state=to_state,
            previous_state=self._state,
            transition_reason=reason,
            details=details,
        )
        self._state = to_state
        self._history.append(result)
        return result

    def settle(self, balance: Decimal) -> RoundTransitionResult:
        """Переход после обновления баланса: следующий раунд или GAME_OVER."""
        if is_exhausted(balance):
            return self.transition(
                RoundState.GAME_OVER,
                reason="balance_exhausted",
                details=f"balance={balance}",
            )
        return self.transition(
            RoundState.AWAITING_STAKE,
            reason="next_round",
            details=f"balance={balance}",
        )
