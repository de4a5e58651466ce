"""Console — консольные реализации ports: ввод, вывод, депозит."""

from .deposit import ConsoleDepositProvider, FixedBalanceProvider
from .display import ConsoleDisplay
from .input_reader import ConsoleInputReader

__all__ = [
    "ConsoleInputReader",
    "ConsoleDisplay",
    "ConsoleDepositProvider",
    "FixedBalanceProvider",
]
