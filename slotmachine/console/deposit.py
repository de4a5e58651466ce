"""Console Deposit Provider — начальный баланс, введённый игроком."""

from decimal import Decimal
from typing import Optional

from slotmachine import messages
from slotmachine.core.math.money import ZERO, to_money
from slotmachine.session.ports import BalanceProvider, Display, InputReader


class ConsoleDepositProvider(BalanceProvider):
    """Запрашивает депозит, пока не введена положительная представимая сумма."""

    def __init__(self, reader: InputReader, display: Optional[Display] = None):
        self.reader = reader
        self.display = display

    def deposit(self) -> Decimal:
        while True:
            raw = self.reader.read_valid_input(messages.DEPOSIT_PROMPT, Decimal)
            try:
                amount = to_money(raw)
            except ValueError:
                self._reject(messages.AMOUNT_OUT_OF_RANGE)
                continue

            if amount > ZERO:
                return amount
            self._reject(messages.DEPOSIT_MUST_BE_POSITIVE)

    def _reject(self, message: str) -> None:
        if self.display is not None:
            self.display.show_errors([message])


class FixedBalanceProvider(BalanceProvider):
    """Депозит из конфигурации (без запроса)."""

    def __init__(self, amount: Decimal):
        self.amount = to_money(amount)

    def deposit(self) -> Decimal:
        return self.amount
