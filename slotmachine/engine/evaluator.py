"""Win Evaluator — оценка выигрыша по строкам поля.

Правило выигрыша строки (попарное, слева направо):
- wildcard совпадает с любым соседом и пропускается при сравнении
- каждая не-wildcard ячейка сравнивается с ближайшей не-wildcard ячейкой слева
- одно несовпадение в любом месте аннулирует выигрыш строки
- строка из одного столбца выигрывает всегда

Эквивалентно: все не-wildcard ячейки строки имеют одно имя.
    A, *, A  → win
    *, A, A  → win
    A, B, A  → 0
    A, *, B  → 0 (B != A)
    B, A, A  → 0

Выплата выигравшей строки = сумма коэффициентов ВСЕХ ячеек строки
(включая wildcard) × stake. Итог — сумма по строкам, округлённая до 2 знаков.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from slotmachine.core.domain.catalog import SymbolCatalog
from slotmachine.core.domain.grid import Grid
from slotmachine.core.domain.symbol import Symbol
from slotmachine.core.math.money import ZERO, round_money


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RowResult:
    """Результат оценки одной строки."""

    row_index: int
    names: Tuple[str, ...]
    is_win: bool
    coefficient_sum: Decimal
    payout: Decimal  # coefficient_sum × stake (0 при проигрыше), без округления


@dataclass(frozen=True)
class EvaluationResult:
    """Результат оценки всего поля."""

    stake: Decimal
    rows: Tuple[RowResult, ...]
    win_amount: Decimal  # Итог, округлён до 2 знаков

    @property
    def winning_rows(self) -> Tuple[RowResult, ...]:
        return tuple(row for row in self.rows if row.is_win)

    @property
    def is_win(self) -> bool:
        return self.win_amount > ZERO


# =============================================================================
# EVALUATOR
# =============================================================================


class WinEvaluator:
    """Оценка выигрыша поля по попарному правилу с wildcard."""

    def __init__(self, catalog: SymbolCatalog):
        self.catalog = catalog

    def evaluate(self, grid: Grid, stake: Decimal) -> Decimal:
        """Сумма выигрыша по всем строкам (2 знака)."""
        return self.evaluate_detailed(grid, stake).win_amount

    def evaluate_detailed(self, grid: Grid, stake: Decimal) -> EvaluationResult:
        """Оценка с разбивкой по строкам.

        Raises:
            SymbolNotFoundError: символ поля отсутствует в каталоге (дефект)
        """
        row_results = tuple(
            self._evaluate_row(index, row, stake) for index, row in enumerate(grid)
        )
        total = sum((row.payout for row in row_results), ZERO)

        return EvaluationResult(
            stake=stake,
            rows=row_results,
            win_amount=round_money(total),
        )

    def is_winning_row(self, row: Tuple[Symbol, ...]) -> bool:
        """Попарная проверка слева направо, wildcard пропускается."""
        previous = None
        for cell in row:
            if self.catalog.is_wildcard(cell.name):
                continue
            if previous is not None and cell.name != previous:
                return False
            previous = cell.name
        return True

    def _evaluate_row(self, index: int, row: Tuple[Symbol, ...], stake: Decimal) -> RowResult:
        # Каждая ячейка резолвится через каталог: рассинхрон генератора и каталога фатален
        symbols = [self.catalog.get(cell.name) for cell in row]
        names = tuple(symbol.name for symbol in symbols)

        if not self.is_winning_row(row):
            return RowResult(
                row_index=index,
                names=names,
                is_win=False,
                coefficient_sum=ZERO,
                payout=ZERO,
            )

        coefficient_sum = sum((symbol.coefficient for symbol in symbols), Decimal("0"))
        return RowResult(
            row_index=index,
            names=names,
            is_win=True,
            coefficient_sum=coefficient_sum,
            payout=coefficient_sum * stake,
        )
