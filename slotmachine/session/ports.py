"""Ports — внешние коллабораторы сессии.

Консольные реализации: slotmachine.console.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence, Type, TypeVar

from slotmachine.core.domain.grid import Grid


T = TypeVar("T")


class InputReader(ABC):
    """Блокирующее чтение типизированного значения от игрока."""

    @abstractmethod
    def read_valid_input(self, prompt: str, value_type: Type[T]) -> T:
        """Повторяет запрос, пока не введено синтаксически корректное значение."""


class Display(ABC):
    """Отображение поля и сообщений. Не влияет на логику."""

    @abstractmethod
    def show_spin_header(self) -> None: ...

    @abstractmethod
    def show_grid(self, grid: Grid) -> None: ...

    @abstractmethod
    def show_errors(self, messages: Sequence[str]) -> None: ...

    @abstractmethod
    def show_round_result(self, win_amount: Decimal, balance: Decimal) -> None: ...

    @abstractmethod
    def show_game_over(self) -> None: ...

    @abstractmethod
    def show_message(self, text: str) -> None: ...


class BalanceProvider(ABC):
    """Источник начального баланса (депозита)."""

    @abstractmethod
    def deposit(self) -> Decimal: ...
