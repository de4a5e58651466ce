"""
Contract Validation Module

Модуль для валидации JSON конфигурации игрового автомата.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SessionConfigValidator,
    validate_session_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SessionConfigValidator",
    # Functions
    "validate_session_config",
]
