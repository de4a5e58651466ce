"""Console Display — цветной вывод поля и сообщений через colorama."""

import sys
from decimal import Decimal
from typing import Dict, Optional, Sequence, TextIO

from colorama import Fore, Style

from slotmachine import messages
from slotmachine.core.domain.grid import Grid
from slotmachine.core.domain.symbol import SymbolColor
from slotmachine.session.ports import Display


SYMBOL_COLORS: Dict[SymbolColor, str] = {
    SymbolColor.BLACK: Fore.BLACK,
    SymbolColor.RED: Fore.RED,
    SymbolColor.GREEN: Fore.GREEN,
    SymbolColor.YELLOW: Fore.YELLOW,
    SymbolColor.BLUE: Fore.BLUE,
    SymbolColor.MAGENTA: Fore.MAGENTA,
    SymbolColor.CYAN: Fore.CYAN,
    SymbolColor.WHITE: Fore.WHITE,
}


class ConsoleDisplay(Display):
    """Вывод в консоль. use_color=False — простой текст без ANSI."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self._stream = stream
        self.use_color = use_color

    def show_spin_header(self) -> None:
        self._print(self._paint(messages.SPIN_RESULTS, Fore.CYAN))

    def show_grid(self, grid: Grid) -> None:
        for row in grid:
            self._print(
                "".join(self._paint(symbol.name, SYMBOL_COLORS[symbol.color]) for symbol in row)
            )

    def show_errors(self, errors: Sequence[str]) -> None:
        for error in errors:
            self._print(self._paint(error, Fore.RED))

    def show_round_result(self, win_amount: Decimal, balance: Decimal) -> None:
        self._print(self._paint(messages.you_win(win_amount, balance), Fore.CYAN))

    def show_game_over(self) -> None:
        self._print(self._paint(messages.GAME_OVER, Fore.RED))

    def show_message(self, text: str) -> None:
        self._print(text)

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def _print(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout)
