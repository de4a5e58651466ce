"""Тексты сообщений игроку."""

from decimal import Decimal
from typing import Final

DEPOSIT_PROMPT: Final[str] = "Please deposit money you would like to play with: "
DEPOSIT_MUST_BE_POSITIVE: Final[str] = "Deposit amount must be greater than 0."
STAKE_AMOUNT_PROMPT: Final[str] = "Enter stake amount: "
SPIN_RESULTS: Final[str] = "Spin results:"
GAME_OVER: Final[str] = "Game over! Your balance is exhausted."
GOODBYE: Final[str] = "Goodbye!"

INVALID_INPUT: Final[str] = "Invalid input. Please try again."
EMPTY_INPUT: Final[str] = "Input cannot be empty. Please try again."
AMOUNT_OUT_OF_RANGE: Final[str] = "Amount is too large. Please enter a smaller amount."


def you_win(win_amount: Decimal, balance: Decimal) -> str:
    return f"You have won {win_amount:.2f}. Your balance is {balance:.2f}."


def session_summary(rounds_played: int, initial_balance: Decimal, final_balance: Decimal) -> str:
    return (
        f"Rounds played: {rounds_played}. "
        f"Started with {initial_balance:.2f}, finished with {final_balance:.2f}."
    )
