"""Тесты консольных адаптеров: ввод, вывод, депозит."""

import io
from decimal import Decimal

import pytest
from colorama import Fore, Style

from slotmachine import messages
from slotmachine.console import (
    ConsoleDepositProvider,
    ConsoleDisplay,
    ConsoleInputReader,
    FixedBalanceProvider,
)
from slotmachine.core.domain import Grid, default_catalog

from tests.fakes import RecordingDisplay


def scripted(*lines):
    """input() replacement returning the given lines in order."""
    remaining = list(lines)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input


# =============================================================================
# INPUT READER
# =============================================================================


class TestConsoleInputReader:
    """Повтор до синтаксически валидного значения."""

    def test_decimal(self):
        out = io.StringIO()
        reader = ConsoleInputReader(scripted(" 12.5 "), out)
        assert reader.read_valid_input("Stake: ", Decimal) == Decimal("12.5")
        assert out.getvalue() == ""

    def test_retries_on_blank_and_garbage(self):
        out = io.StringIO()
        fake_input = scripted("", "abc", "NaN", "inf", "3")
        reader = ConsoleInputReader(fake_input, out)

        assert reader.read_valid_input("Stake: ", Decimal) == Decimal("3")
        assert fake_input.prompts == ["Stake: "] * 5

        lines = out.getvalue().splitlines()
        assert lines[0] == messages.EMPTY_INPUT
        assert lines[1:] == [messages.INVALID_INPUT] * 3

    def test_int(self):
        reader = ConsoleInputReader(scripted("1.5", "7"), io.StringIO())
        assert reader.read_valid_input("Rows: ", int) == 7

    def test_float_rejects_non_finite(self):
        reader = ConsoleInputReader(scripted("nan", "2.25"), io.StringIO())
        assert reader.read_valid_input("x: ", float) == 2.25

    def test_str(self):
        reader = ConsoleInputReader(scripted("  hello "), io.StringIO())
        assert reader.read_valid_input("Name: ", str) == "hello"

    def test_eof_propagates(self):
        def closed_input(prompt):
            raise EOFError

        with pytest.raises(EOFError):
            ConsoleInputReader(closed_input, io.StringIO()).read_valid_input("x: ", Decimal)


# =============================================================================
# DISPLAY
# =============================================================================


class TestConsoleDisplay:
    """Вывод поля и сообщений."""

    @pytest.fixture
    def grid(self):
        return Grid.from_names(default_catalog(), [["A", "*", "A"], ["B", "P", "B"]])

    def test_plain_grid(self, grid):
        out = io.StringIO()
        ConsoleDisplay(out, use_color=False).show_grid(grid)
        assert out.getvalue() == "A*A\nBPB\n"

    def test_colored_grid(self, grid):
        out = io.StringIO()
        ConsoleDisplay(out, use_color=True).show_grid(grid)
        first_line = out.getvalue().splitlines()[0]
        assert first_line.startswith(f"{Fore.YELLOW}A{Style.RESET_ALL}")
        assert f"{Fore.WHITE}*{Style.RESET_ALL}" in first_line

    def test_round_result_and_game_over(self):
        out = io.StringIO()
        display = ConsoleDisplay(out, use_color=False)
        display.show_spin_header()
        display.show_round_result(Decimal("25"), Decimal("115"))
        display.show_game_over()
        assert out.getvalue().splitlines() == [
            messages.SPIN_RESULTS,
            "You have won 25.00. Your balance is 115.00.",
            messages.GAME_OVER,
        ]

    def test_errors_each_on_own_line(self):
        out = io.StringIO()
        ConsoleDisplay(out, use_color=False).show_errors(["one", "two"])
        assert out.getvalue() == "one\ntwo\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleDisplay(use_color=False).show_message("hi")
        assert capsys.readouterr().out == "hi\n"


# =============================================================================
# DEPOSIT
# =============================================================================


class TestDepositProviders:
    """Источник начального баланса."""

    def test_console_deposit_retries_until_positive(self):
        display = RecordingDisplay()
        reader = ConsoleInputReader(scripted("0", "-5", "100.456"), io.StringIO())

        amount = ConsoleDepositProvider(reader, display).deposit()

        assert amount == Decimal("100.46")
        assert display.of("errors") == [(messages.DEPOSIT_MUST_BE_POSITIVE,)] * 2

    def test_console_deposit_rejects_unrepresentable_amount(self):
        display = RecordingDisplay()
        reader = ConsoleInputReader(
            scripted("1e30", "123456789012345678901234567890", "250"), io.StringIO()
        )

        amount = ConsoleDepositProvider(reader, display).deposit()

        assert amount == Decimal("250.00")
        assert display.of("errors") == [(messages.AMOUNT_OUT_OF_RANGE,)] * 2

    def test_reader_passes_huge_finite_decimal_through(self):
        """Парсер проверяет только синтаксис; диапазон — забота потребителя"""
        reader = ConsoleInputReader(scripted("1e30"), io.StringIO())
        assert reader.read_valid_input("x: ", Decimal) == Decimal("1e30")

    def test_fixed_balance(self):
        assert FixedBalanceProvider(Decimal("50")).deposit() == Decimal("50.00")
