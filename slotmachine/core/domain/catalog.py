"""
SymbolCatalog — Неизменяемый каталог символов

Каталог фиксируется при старте процесса и никогда не изменяется.
Поиск по имени — через mapping, построенный один раз (O(1)).

Отсутствие имени в каталоге — дефект программы (генератор и каталог
рассинхронизированы), а не пользовательская ошибка.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Final, Iterable, Iterator, Mapping, Optional, Tuple

from .symbol import Symbol, SymbolColor


# =============================================================================
# CONSTANTS
# =============================================================================

# Маркер wildcard символа по умолчанию
DEFAULT_WILDCARD: Final[str] = "*"


# =============================================================================
# ERRORS
# =============================================================================


class SymbolNotFoundError(LookupError):
    """Имя символа отсутствует в каталоге (фатальная ошибка)."""

    def __init__(self, name: str):
        super().__init__(f"Symbol {name!r} is not in the catalog")
        self.name = name


# =============================================================================
# CATALOG
# =============================================================================


class SymbolCatalog:
    """
    Упорядоченный неизменяемый набор символов с уникальными именами.

    Один символ может быть назначен wildcard: он совпадает с любым
    соседом, но вносит в выплату собственный коэффициент.
    """

    def __init__(
        self,
        symbols: Iterable[Symbol],
        wildcard_name: Optional[str] = DEFAULT_WILDCARD,
    ):
        """
        Args:
            symbols: символы каталога (порядок сохраняется)
            wildcard_name: имя wildcard символа или None (без wildcard)

        Raises:
            ValueError: пустой каталог, дубликаты имён, неизвестный wildcard
        """
        ordered = tuple(symbols)
        if not ordered:
            raise ValueError("Symbol catalog cannot be empty")

        index = {}
        for symbol in ordered:
            if symbol.name in index:
                raise ValueError(f"Duplicate symbol name in catalog: {symbol.name!r}")
            index[symbol.name] = symbol

        if wildcard_name is not None and wildcard_name not in index:
            raise ValueError(
                f"Wildcard {wildcard_name!r} must be one of the catalog symbols"
            )

        self._symbols: Tuple[Symbol, ...] = ordered
        self._index: Mapping[str, Symbol] = MappingProxyType(index)
        self._wildcard_name = wildcard_name

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, name: str) -> Symbol:
        """
        Поиск символа по имени.

        Raises:
            SymbolNotFoundError: если имени нет в каталоге
        """
        try:
            return self._index[name]
        except KeyError:
            raise SymbolNotFoundError(name) from None

    def is_wildcard(self, name: str) -> bool:
        return self._wildcard_name is not None and name == self._wildcard_name

    @property
    def wildcard(self) -> Optional[Symbol]:
        if self._wildcard_name is None:
            return None
        return self._index[self._wildcard_name]

    @property
    def wildcard_name(self) -> Optional[str]:
        return self._wildcard_name

    @property
    def symbols(self) -> Tuple[Symbol, ...]:
        return self._symbols

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(symbol.name for symbol in self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolCatalog(names={list(self.names)}, wildcard={self._wildcard_name!r})"


# =============================================================================
# DEFAULT CATALOG
# =============================================================================


def default_catalog() -> SymbolCatalog:
    """
    Классический каталог: Apple, Banana, Pineapple и Wildcard.

    | Символ    | Имя | Коэффициент | Вес |
    |-----------|-----|-------------|-----|
    | Apple     | A   | 0.4         | 45  |
    | Banana    | B   | 0.6         | 35  |
    | Pineapple | P   | 0.8         | 15  |
    | Wildcard  | *   | 0           | 5   |
    """
    return SymbolCatalog(
        [
            Symbol(name="A", coefficient=Decimal("0.4"), weight=Decimal("45"), color=SymbolColor.YELLOW),
            Symbol(name="B", coefficient=Decimal("0.6"), weight=Decimal("35"), color=SymbolColor.GREEN),
            Symbol(name="P", coefficient=Decimal("0.8"), weight=Decimal("15"), color=SymbolColor.MAGENTA),
            Symbol(name="*", coefficient=Decimal("0"), weight=Decimal("5"), color=SymbolColor.WHITE),
        ],
        wildcard_name=DEFAULT_WILDCARD,
    )
