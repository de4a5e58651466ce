"""
Grid — результат одного вращения

Dimensions — конфигурация (rows, columns), фиксированная на сессию.
Grid — неизменяемая матрица R×C ссылок на символы, создаётся заново
при каждом вращении и принадлежит только текущему раунду.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from pydantic import BaseModel, Field

from .catalog import SymbolCatalog
from .symbol import Symbol


class Dimensions(BaseModel):
    """Размеры игрового поля."""

    rows: int = Field(default=4, gt=0, description="Количество строк")
    columns: int = Field(default=3, gt=0, description="Количество столбцов")

    model_config = {"frozen": True}

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class Grid:
    """Матрица символов R×C (row-major)."""

    rows: Tuple[Tuple[Symbol, ...], ...]

    def __post_init__(self):
        if not self.rows:
            raise ValueError("Grid must have at least one row")

        width = len(self.rows[0])
        if width == 0:
            raise ValueError("Grid rows must have at least one column")
        for row in self.rows:
            if len(row) != width:
                raise ValueError(
                    f"Grid rows must have equal length: expected {width}, got {len(row)}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Symbol]]) -> "Grid":
        return cls(rows=tuple(tuple(row) for row in rows))

    @classmethod
    def from_names(cls, catalog: SymbolCatalog, rows: Iterable[Sequence[str]]) -> "Grid":
        """
        Построение grid по именам символов.

        Raises:
            SymbolNotFoundError: если имени нет в каталоге
        """
        return cls.from_rows([catalog.get(name) for name in row] for row in rows)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(rows=len(self.rows), columns=len(self.rows[0]))

    def names(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(symbol.name for symbol in row) for row in self.rows)

    def __iter__(self) -> Iterator[Tuple[Symbol, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
