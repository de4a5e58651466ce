"""Engine — генерация символов, вращение поля и оценка выигрыша."""

from .evaluator import EvaluationResult, RowResult, WinEvaluator
from .generator import SymbolGenerator
from .spinner import GridSpinner

__all__ = [
    "SymbolGenerator",
    "GridSpinner",
    "WinEvaluator",
    "EvaluationResult",
    "RowResult",
]
