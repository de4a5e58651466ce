"""Symbol Generator — случайный выбор символа из каталога.

Каждый вызов независим, выбор с возвращением, с учётом Symbol.weight
(при равных весах — равномерно). Источник случайности инжектируется,
что делает генератор детерминированным при фиксированном seed.
"""

import random
from typing import List, Optional

from slotmachine.core.domain.catalog import SymbolCatalog
from slotmachine.core.domain.symbol import Symbol


class SymbolGenerator:
    """Генератор символов поверх неизменяемого каталога."""

    def __init__(self, catalog: SymbolCatalog, rng: Optional[random.Random] = None):
        """
        Args:
            catalog: каталог символов
            rng: источник случайности (по умолчанию — новый random.Random())
        """
        self.catalog = catalog
        self._rng = rng or random.Random()

        self._symbols: List[Symbol] = list(catalog)
        self._weights: List[float] = [float(symbol.weight) for symbol in self._symbols]
        self._uniform = len(set(self._weights)) == 1

    @classmethod
    def seeded(cls, catalog: SymbolCatalog, seed: int) -> "SymbolGenerator":
        """Детерминированный генератор с фиксированным seed."""
        return cls(catalog, random.Random(seed))

    @property
    def symbols(self) -> List[Symbol]:
        return list(self._symbols)

    def get_random_symbol(self) -> Symbol:
        """Один независимый случайный символ из каталога."""
        if self._uniform:
            return self._rng.choice(self._symbols)
        return self._rng.choices(self._symbols, weights=self._weights, k=1)[0]
