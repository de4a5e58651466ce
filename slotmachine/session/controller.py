"""Round Controller — оркестрация раундов и владение балансом сессии.

Раунд:
1. Округление ставки до 2 знаков
2. Валидация ставки (повторный ввод до валидной)
3. Вращение поля и отображение
4. Оценка выигрыша
5. balance = round(balance - stake + win, 2)
6. balance <= 0 → GAME_OVER (терминальное состояние)

Сессия — явный цикл по раундам, без рекурсии.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from slotmachine import messages
from slotmachine.core.domain.grid import Dimensions, Grid
from slotmachine.core.math.money import MoneyLike, ZERO, settle_balance, to_money
from slotmachine.engine.evaluator import EvaluationResult, WinEvaluator
from slotmachine.engine.spinner import GridSpinner
from slotmachine.session.ports import Display, InputReader
from slotmachine.session.state_machine import RoundState, RoundStateMachine
from slotmachine.stake.rules import StakeContext
from slotmachine.stake.validator import StakeValidator


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class RoundResult:
    """Результат одного раунда."""

    round_number: int
    stake: Decimal
    grid: Grid
    evaluation: EvaluationResult
    balance_before: Decimal
    balance_after: Decimal
    game_over: bool

    @property
    def win_amount(self) -> Decimal:
        return self.evaluation.win_amount


@dataclass(frozen=True)
class SessionSummary:
    """Итог сессии."""

    initial_balance: Decimal
    final_balance: Decimal
    rounds_played: int
    total_staked: Decimal
    total_won: Decimal
    game_over: bool


class SessionOverError(RuntimeError):
    """Раунд запрошен после GAME_OVER."""


# =============================================================================
# SESSION
# =============================================================================


class SlotMachineSession:
    """Сессия игрового автомата: баланс, раунды, state machine."""

    def __init__(
        self,
        spinner: GridSpinner,
        evaluator: WinEvaluator,
        validator: StakeValidator,
        input_reader: InputReader,
        display: Display,
        dimensions: Dimensions,
        initial_balance: MoneyLike,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            spinner: вращение поля
            evaluator: оценка выигрыша
            validator: валидатор ставки
            input_reader: повторный ввод ставки
            display: отображение поля и сообщений
            dimensions: размеры поля (фиксированы на сессию)
            initial_balance: начальный баланс (> 0)
            logger: логгер (по умолчанию — логгер модуля)
        """
        balance = to_money(initial_balance)
        if balance <= ZERO:
            raise ValueError(f"Initial balance must be positive, got {balance}")

        self.spinner = spinner
        self.evaluator = evaluator
        self.validator = validator
        self.input_reader = input_reader
        self.display = display
        self.dimensions = dimensions
        self.logger = logger or logging.getLogger(__name__)

        self._initial_balance = balance
        self._balance = balance
        self._machine = RoundStateMachine()
        self._rounds_played = 0
        self._total_staked = ZERO
        self._total_won = ZERO

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def state(self) -> RoundState:
        return self._machine.state

    @property
    def state_machine(self) -> RoundStateMachine:
        return self._machine

    @property
    def is_over(self) -> bool:
        return self._machine.is_terminal

    # -------------------------------------------------------------------------
    # Play
    # -------------------------------------------------------------------------

    def play(self, first_stake: MoneyLike) -> SessionSummary:
        """Играть раунды, пока баланс не исчерпан."""
        stake = first_stake
        while True:
            result = self.play_round(stake)
            if result.game_over:
                break
            stake = self._read_stake()

        return self.summary()

    def play_round(self, stake: MoneyLike) -> RoundResult:
        """Один раунд: ставка → вращение → оценка → баланс.

        Ставка, которую нельзя представить денежной величиной (например,
        1e30), обрабатывается как невалидная: сообщение и повторный ввод.

        Если вращение или оценка падают, исключение пробрасывается, а
        сессия остаётся в промежуточном состоянии и больше не играет.

        Raises:
            SessionOverError: если сессия уже в GAME_OVER или прервана
                ошибкой предыдущего раунда
        """
        if self._machine.is_terminal:
            raise SessionOverError("Session is over, balance is exhausted")
        if self._machine.state != RoundState.AWAITING_STAKE:
            raise SessionOverError(
                f"Session aborted: previous round failed in state {self._machine.state.value}"
            )

        stake = self._prompt_for_valid_stake(stake)
        self._machine.transition(RoundState.SPINNING, "stake_accepted", f"stake={stake}")

        self.display.show_spin_header()
        grid = self.spinner.spin(self.dimensions)
        self.display.show_grid(grid)
        self._machine.transition(RoundState.EVALUATING, "grid_spun")

        evaluation = self.evaluator.evaluate_detailed(grid, stake)

        balance_before = self._balance
        self._balance = settle_balance(balance_before, stake, evaluation.win_amount)
        self._rounds_played += 1
        self._total_staked += stake
        self._total_won += evaluation.win_amount
        self._machine.transition(
            RoundState.BALANCE_UPDATED,
            "balance_settled",
            f"{balance_before} - {stake} + {evaluation.win_amount} = {self._balance}",
        )

        self.logger.info(
            "Round %d: stake=%s win=%s balance=%s→%s winning_rows=%d",
            self._rounds_played,
            stake,
            evaluation.win_amount,
            balance_before,
            self._balance,
            len(evaluation.winning_rows),
        )
        self.display.show_round_result(evaluation.win_amount, self._balance)

        transition = self._machine.settle(self._balance)
        game_over = transition.new_state == RoundState.GAME_OVER
        if game_over:
            self.logger.info("Game over after %d rounds", self._rounds_played)
            self.display.show_game_over()

        return RoundResult(
            round_number=self._rounds_played,
            stake=stake,
            grid=grid,
            evaluation=evaluation,
            balance_before=balance_before,
            balance_after=self._balance,
            game_over=game_over,
        )

    def summary(self) -> SessionSummary:
        return SessionSummary(
            initial_balance=self._initial_balance,
            final_balance=self._balance,
            rounds_played=self._rounds_played,
            total_staked=self._total_staked,
            total_won=self._total_won,
            game_over=self._machine.is_terminal,
        )

    # -------------------------------------------------------------------------
    # Stake input
    # -------------------------------------------------------------------------

    def _prompt_for_valid_stake(self, raw_stake: MoneyLike) -> Decimal:
        """Повторный ввод ставки, пока валидатор её не примет."""
        stake = self._coerce_stake(raw_stake)

        while True:
            if stake is not None:
                result = self.validator.validate(
                    StakeContext(stake=stake, current_balance=self._balance)
                )
                if result.is_valid:
                    return stake

                self.logger.warning(
                    "Stake %s rejected: %s", stake, ", ".join(result.failed_rules)
                )
                self.display.show_errors(result.errors)

            stake = self._coerce_stake(self._read_stake())

    def _coerce_stake(self, raw_stake: MoneyLike) -> Optional[Decimal]:
        """Денежная величина или None (с сообщением), если число не представимо."""
        try:
            return to_money(raw_stake)
        except ValueError as exc:
            self.logger.warning("Stake %r rejected: %s", raw_stake, exc)
            self.display.show_errors([messages.AMOUNT_OUT_OF_RANGE])
            return None

    def _read_stake(self) -> Decimal:
        return self.input_reader.read_valid_input(messages.STAKE_AMOUNT_PROMPT, Decimal)
