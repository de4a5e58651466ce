"""
Symbol — Модель символа барабана

Immutable Pydantic модель символа: имя, коэффициент выплаты, вес выпадения
и цвет отображения. Цвет не участвует в игровой логике.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class SymbolColor(str, Enum):
    """Цвет символа в консоли"""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


# =============================================================================
# SYMBOL
# =============================================================================


class Symbol(BaseModel):
    """
    Символ барабана.

    Идентичность определяется именем. После создания не изменяется.
    """

    name: str = Field(..., min_length=1, description="Уникальное имя символа")
    coefficient: Decimal = Field(
        ..., ge=0, description="Коэффициент выплаты (множитель ставки)"
    )
    weight: Decimal = Field(
        default=Decimal("1"), gt=0, description="Относительный вес выпадения"
    )
    color: SymbolColor = Field(
        default=SymbolColor.WHITE, description="Цвет отображения"
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Имя без пробельных символов по краям"""
        if v != v.strip():
            raise ValueError("symbol name must not have leading/trailing whitespace")
        return v

    @field_validator("coefficient", "weight")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        """NaN/Inf запрещены"""
        if not v.is_finite():
            raise ValueError("value must be finite")
        return v

    def __str__(self) -> str:
        return self.name
