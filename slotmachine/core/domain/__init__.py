"""
Domain models and value objects.

Contains fundamental domain entities like Symbol, SymbolCatalog, Grid, Dimensions.
"""

from slotmachine.core.domain.catalog import (
    DEFAULT_WILDCARD,
    SymbolCatalog,
    SymbolNotFoundError,
    default_catalog,
)
from slotmachine.core.domain.grid import Dimensions, Grid
from slotmachine.core.domain.symbol import Symbol, SymbolColor

__all__ = [
    # Symbol model
    "Symbol",
    "SymbolColor",
    # Catalog
    "DEFAULT_WILDCARD",
    "SymbolCatalog",
    "SymbolNotFoundError",
    "default_catalog",
    # Grid
    "Dimensions",
    "Grid",
]
