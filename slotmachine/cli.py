"""Console entry point: `slot-machine` / `python -m slotmachine`."""

import argparse
import logging
import sys
from decimal import Decimal
from typing import Callable, List, Optional, TextIO

import colorama
import jsonschema

from slotmachine import messages
from slotmachine.config import SessionConfig, load_session_config
from slotmachine.console import (
    ConsoleDepositProvider,
    ConsoleDisplay,
    ConsoleInputReader,
    FixedBalanceProvider,
)
from slotmachine.core.domain.grid import Dimensions
from slotmachine.engine import GridSpinner, SymbolGenerator, WinEvaluator
from slotmachine.session import BalanceProvider, SlotMachineSession
from slotmachine.stake import StakeValidator


LOGGER_NAME = "slotmachine"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger to write to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slot-machine",
        description="Console slot machine. Spin until your balance runs out.",
    )
    parser.add_argument("--config", help="path to a JSON session config")
    parser.add_argument("--balance", type=Decimal, help="initial balance (skips the deposit prompt)")
    parser.add_argument("--rows", type=int, help="grid rows")
    parser.add_argument("--columns", type=int, help="grid columns")
    parser.add_argument("--seed", type=int, help="random seed for reproducible spins")
    parser.add_argument("--max-stake", type=Decimal, help="maximum stake per round")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level for stderr diagnostics",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SessionConfig:
    """File config (if any) with CLI flags applied on top."""
    config = load_session_config(args.config) if args.config else SessionConfig()

    dimensions = None
    if args.rows is not None or args.columns is not None:
        dimensions = Dimensions(
            rows=args.rows if args.rows is not None else config.dimensions.rows,
            columns=args.columns if args.columns is not None else config.dimensions.columns,
        )

    return config.with_overrides(
        initial_balance=args.balance,
        dimensions=dimensions,
        seed=args.seed,
        max_stake=args.max_stake,
    )


def build_session(
    config: SessionConfig,
    reader: ConsoleInputReader,
    display: ConsoleDisplay,
    balance_provider: Optional[BalanceProvider] = None,
) -> SlotMachineSession:
    catalog = config.build_catalog()
    if config.seed is not None:
        generator = SymbolGenerator.seeded(catalog, config.seed)
    else:
        generator = SymbolGenerator(catalog)

    if balance_provider is None:
        if config.initial_balance is not None:
            balance_provider = FixedBalanceProvider(config.initial_balance)
        else:
            balance_provider = ConsoleDepositProvider(reader, display)

    return SlotMachineSession(
        spinner=GridSpinner(generator),
        evaluator=WinEvaluator(catalog),
        validator=StakeValidator.from_config(config.stake_validator_config()),
        input_reader=reader,
        display=display,
        dimensions=config.dimensions,
        initial_balance=balance_provider.deposit(),
        logger=logging.getLogger(f"{LOGGER_NAME}.session"),
    )


def main(
    argv: Optional[List[str]] = None,
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.log_level)

    if not args.no_color:
        colorama.just_fix_windows_console()

    try:
        config = resolve_config(args)
    except (OSError, ValueError, jsonschema.ValidationError) as exc:
        parser.error(f"invalid configuration: {exc}")

    logger.debug("Session config: %s", config)

    reader = ConsoleInputReader(input_func=input_func, output=stream)
    display = ConsoleDisplay(stream=stream, use_color=not args.no_color)

    try:
        session = build_session(config, reader, display)
        first_stake = reader.read_valid_input(messages.STAKE_AMOUNT_PROMPT, Decimal)
        summary = session.play(first_stake)
    except KeyboardInterrupt:
        display.show_message("")
        display.show_message(messages.GOODBYE)
        return 130
    except EOFError:
        display.show_message("")
        display.show_message(messages.GOODBYE)
        return 1

    display.show_message(
        messages.session_summary(summary.rounds_played, summary.initial_balance, summary.final_balance)
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
