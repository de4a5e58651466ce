"""Console Input Reader — типизированный ввод с повтором до валидного значения."""

import math
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TextIO, Type, TypeVar

from slotmachine import messages
from slotmachine.session.ports import InputReader


T = TypeVar("T")


class ConsoleInputReader(InputReader):
    """Чтение из консоли.

    Пустой ввод, ошибка парсинга и NaN/Inf — сообщение и повтор запроса.
    Поддерживаемые типы: Decimal, int, float, str.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self._input = input_func
        self._output = output

    def read_valid_input(self, prompt: str, value_type: Type[T]) -> T:
        while True:
            text = self._input(prompt).strip()
            if not text:
                self._write(messages.EMPTY_INPUT)
                continue

            try:
                return self._parse(text, value_type)
            except (ValueError, InvalidOperation):
                self._write(messages.INVALID_INPUT)

    @staticmethod
    def _parse(text: str, value_type: Type[T]) -> T:
        if value_type is Decimal:
            value = Decimal(text)
            if not value.is_finite():
                raise ValueError(f"Not a finite number: {text!r}")
            return value

        if value_type is float:
            value = float(text)
            if not math.isfinite(value):
                raise ValueError(f"Not a finite number: {text!r}")
            return value

        return value_type(text)

    def _write(self, text: str) -> None:
        print(text, file=self._output or sys.stdout)
