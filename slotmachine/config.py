"""
SessionConfig — Конфигурация сессии игрового автомата

Immutable Pydantic модель: начальный баланс, размеры поля, seed,
каталог символов и лимиты ставки.

Загрузка из JSON: контракт session_config.json (jsonschema) →
SessionConfig (pydantic). Числа с плавающей точкой читаются как Decimal.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from slotmachine.core.contracts import validate_session_config
from slotmachine.core.domain.catalog import DEFAULT_WILDCARD, SymbolCatalog, default_catalog
from slotmachine.core.domain.grid import Dimensions
from slotmachine.core.domain.symbol import Symbol
from slotmachine.core.math.money import MONEY_QUANT, round_money
from slotmachine.stake.validator import StakeValidatorConfig


class SessionConfig(BaseModel):
    """Конфигурация сессии."""

    initial_balance: Optional[Decimal] = Field(
        default=None, gt=0, description="Начальный баланс (None — запросить депозит)"
    )
    dimensions: Dimensions = Field(default_factory=Dimensions, description="Размеры поля")
    seed: Optional[int] = Field(default=None, description="Seed генератора символов")
    wildcard: Optional[str] = Field(default=DEFAULT_WILDCARD, description="Имя wildcard символа")
    symbols: Optional[List[Symbol]] = Field(
        default=None, min_length=1, description="Каталог символов (None — классический)"
    )
    min_stake: Decimal = Field(default=MONEY_QUANT, gt=0, description="Минимальная ставка")
    max_stake: Optional[Decimal] = Field(default=None, gt=0, description="Максимальная ставка")

    model_config = {"frozen": True}

    @field_validator("initial_balance", "min_stake", "max_stake")
    @classmethod
    def validate_money_range(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        """Сумма должна округляться до 2 знаков без потери точности."""
        if v is not None:
            round_money(v)
        return v

    @model_validator(mode="after")
    def validate_stake_limits(self) -> "SessionConfig":
        """min_stake <= max_stake"""
        if self.max_stake is not None and self.max_stake < self.min_stake:
            raise ValueError(
                f"max_stake ({self.max_stake}) must not be below min_stake ({self.min_stake})"
            )
        return self

    @model_validator(mode="after")
    def validate_catalog(self) -> "SessionConfig":
        """Уникальные имена символов; wildcard — один из символов каталога."""
        if self.symbols is None:
            names = default_catalog().names
        else:
            names = [symbol.name for symbol in self.symbols]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise ValueError(f"Duplicate symbol names: {duplicates}")

        if self.wildcard is not None and self.wildcard not in names:
            raise ValueError(
                f"Wildcard {self.wildcard!r} is not one of the symbols {list(names)}"
            )
        return self

    def build_catalog(self) -> SymbolCatalog:
        """Каталог из конфигурации или классический по умолчанию."""
        if self.symbols is None:
            catalog = default_catalog()
            if self.wildcard == catalog.wildcard_name:
                return catalog
            return SymbolCatalog(catalog.symbols, wildcard_name=self.wildcard)
        return SymbolCatalog(self.symbols, wildcard_name=self.wildcard)

    def stake_validator_config(self) -> StakeValidatorConfig:
        return StakeValidatorConfig(min_stake=self.min_stake, max_stake=self.max_stake)

    def with_overrides(self, **overrides: Any) -> "SessionConfig":
        """Копия с заменой непустых значений (CLI флаги поверх файла)."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return SessionConfig.model_validate({**self.model_dump(), **updates})


def parse_session_config(data: Dict[str, Any]) -> SessionConfig:
    """
    Проверка по контракту и построение модели.

    Raises:
        jsonschema.ValidationError: данные не соответствуют session_config.json
        pydantic.ValidationError: данные не проходят валидацию модели
    """
    validate_session_config(data)
    return SessionConfig.model_validate(data)


def load_session_config(path: Union[str, Path]) -> SessionConfig:
    """
    Загрузка конфигурации из JSON файла.

    Raises:
        FileNotFoundError: файл не найден
        json.JSONDecodeError: файл не является валидным JSON
        jsonschema.ValidationError: нарушение контракта
        pydantic.ValidationError: нарушение модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f, parse_float=Decimal)

    return parse_session_config(data)
