"""Grid Spinner — заполнение поля R×C случайными символами."""

import logging
from typing import Optional, Union

from slotmachine.core.domain.grid import Dimensions, Grid
from slotmachine.engine.generator import SymbolGenerator


logger = logging.getLogger(__name__)


class GridSpinner:
    """Вращение барабанов: rows × cols независимых вызовов генератора.

    Заполнение row-major, без ограничений на соседство символов.
    """

    def __init__(self, generator: SymbolGenerator):
        self.generator = generator

    def spin(
        self,
        dimensions: Union[Dimensions, int],
        columns: Optional[int] = None,
    ) -> Grid:
        """Новое поле заданных размеров.

        Args:
            dimensions: Dimensions или количество строк (тогда нужен columns)
            columns: количество столбцов, если dimensions передан как int

        Returns:
            Grid размером rows × columns
        """
        if not isinstance(dimensions, Dimensions):
            if columns is None:
                raise TypeError("spin(rows, columns) requires both rows and columns")
            dimensions = Dimensions(rows=dimensions, columns=columns)

        rows = []
        for _ in range(dimensions.rows):
            rows.append(
                tuple(self.generator.get_random_symbol() for _ in range(dimensions.columns))
            )

        grid = Grid(rows=tuple(rows))
        logger.debug("Spun grid %s", grid.names())
        return grid
