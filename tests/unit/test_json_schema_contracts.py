"""
Tests for JSON Schema contracts and SessionConfig

Покрывает:
- Meta-validation схемы session_config
- Валидные и невалидные конфигурации
- Загрузку JSON (Decimal для float)
- Построение каталога и лимитов ставки
- CLI overrides
"""

import json
from decimal import Decimal

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from slotmachine.config import SessionConfig, load_session_config, parse_session_config
from slotmachine.core.contracts import (
    SchemaLoader,
    SessionConfigValidator,
    validate_session_config,
)
from slotmachine.core.domain import Dimensions, SymbolColor


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_config_data():
    """Валидная конфигурация с собственным каталогом."""
    return {
        "initial_balance": Decimal("100.00"),
        "dimensions": {"rows": 3, "columns": 5},
        "seed": 42,
        "wildcard": "W",
        "min_stake": Decimal("0.50"),
        "max_stake": Decimal("25"),
        "symbols": [
            {"name": "C", "coefficient": Decimal("0.5"), "weight": 60, "color": "red"},
            {"name": "S", "coefficient": Decimal("1.5"), "weight": 30},
            {"name": "W", "coefficient": 0, "weight": 10, "color": "cyan"},
        ],
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """Загрузка схем."""

    def test_schema_loads_and_is_cached(self):
        loader = SchemaLoader()
        schema = loader.load_schema("session_config")
        assert schema["title"] == "SessionConfig"
        assert loader.load_schema("session_config") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_injected_loader(self, tmp_path):
        (tmp_path / "session_config.json").write_text(
            json.dumps({"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}),
            encoding="utf-8",
        )
        validator = SessionConfigValidator(SchemaLoader(tmp_path))
        validator.validate({"anything": 1})

    def test_invalid_schema_file(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError):
            SchemaLoader(tmp_path).load_schema("broken")


class TestSessionConfigContract:
    """Контракт session_config.json."""

    def test_valid(self, valid_config_data):
        validate_session_config(valid_config_data)
        assert list(SessionConfigValidator().iter_errors(valid_config_data)) == []

    def test_empty_object_is_valid(self):
        validate_session_config({})

    @pytest.mark.parametrize(
        "patch",
        [
            {"initial_balance": 0},
            {"initial_balance": "100"},
            {"dimensions": {"rows": 0, "columns": 3}},
            {"dimensions": {"rows": 3}},
            {"symbols": []},
            {"symbols": [{"name": "A"}]},
            {"symbols": [{"name": "A", "coefficient": -1}]},
            {"symbols": [{"name": "A", "coefficient": 1, "color": "plaid"}]},
            {"unknown_key": True},
        ],
    )
    def test_invalid(self, patch):
        with pytest.raises(ValidationError):
            validate_session_config(patch)

    def test_iter_errors_reports_all(self):
        errors = list(
            SessionConfigValidator().iter_errors({"initial_balance": -1, "seed": "x"})
        )
        assert len(errors) == 2


# =============================================================================
# SESSION CONFIG
# =============================================================================


class TestSessionConfig:
    """Pydantic модель SessionConfig."""

    def test_defaults(self):
        config = SessionConfig()
        assert config.initial_balance is None
        assert config.dimensions == Dimensions(rows=4, columns=3)
        assert config.min_stake == Decimal("0.01")
        assert config.build_catalog().names == ("A", "B", "P", "*")

    def test_parse(self, valid_config_data):
        config = parse_session_config(valid_config_data)
        catalog = config.build_catalog()

        assert config.dimensions == Dimensions(rows=3, columns=5)
        assert catalog.names == ("C", "S", "W")
        assert catalog.wildcard_name == "W"
        assert catalog.get("C").color == SymbolColor.RED

        limits = config.stake_validator_config()
        assert limits.min_stake == Decimal("0.50")
        assert limits.max_stake == Decimal("25")

    def test_max_below_min_rejected(self):
        with pytest.raises(ModelValidationError):
            SessionConfig(min_stake=Decimal("5"), max_stake=Decimal("1"))

    def test_unknown_wildcard_rejected_on_parse(self, valid_config_data):
        valid_config_data["wildcard"] = "Z"
        with pytest.raises(ModelValidationError, match="Wildcard 'Z'"):
            parse_session_config(valid_config_data)

    def test_custom_symbols_without_default_wildcard(self):
        """Свой каталог без '*' и wildcard по умолчанию → ошибка загрузки, не сборки"""
        with pytest.raises(ModelValidationError, match="Wildcard '\\*'"):
            parse_session_config({"symbols": [{"name": "Z", "coefficient": 0}]})

    def test_custom_symbols_without_wildcard(self):
        config = parse_session_config(
            {"wildcard": None, "symbols": [{"name": "Z", "coefficient": 0}]}
        )
        assert config.build_catalog().wildcard is None

    def test_duplicate_symbol_names_rejected(self):
        with pytest.raises(ModelValidationError, match="Duplicate symbol names"):
            parse_session_config(
                {
                    "symbols": [
                        {"name": "A", "coefficient": 1},
                        {"name": "A", "coefficient": 2},
                        {"name": "*", "coefficient": 0},
                    ]
                }
            )

    def test_default_catalog_without_wildcard(self):
        catalog = SessionConfig(wildcard=None).build_catalog()
        assert catalog.names == ("A", "B", "P", "*")
        assert not catalog.is_wildcard("*")

    def test_default_catalog_foreign_wildcard_rejected(self):
        with pytest.raises(ModelValidationError):
            SessionConfig(wildcard="W")

    @pytest.mark.parametrize("field", ["initial_balance", "min_stake", "max_stake"])
    def test_amount_beyond_precision_rejected(self, field):
        with pytest.raises(ModelValidationError, match="out of range"):
            SessionConfig(**{field: Decimal("1e30")})

    def test_frozen(self):
        with pytest.raises(ModelValidationError):
            SessionConfig().seed = 3

    def test_overrides(self, valid_config_data):
        config = parse_session_config(valid_config_data)
        updated = config.with_overrides(
            initial_balance=Decimal("7.5"),
            seed=None,
            dimensions=Dimensions(rows=1, columns=1),
        )
        assert updated.initial_balance == Decimal("7.5")
        assert updated.seed == 42
        assert updated.dimensions == Dimensions(rows=1, columns=1)
        assert updated.build_catalog().names == ("C", "S", "W")

    def test_no_overrides_returns_same(self):
        config = SessionConfig()
        assert config.with_overrides(seed=None) is config


class TestLoadSessionConfig:
    """Загрузка из файла."""

    def test_floats_read_as_decimal(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(
            json.dumps(
                {
                    "initial_balance": 10.1,
                    "symbols": [
                        {"name": "A", "coefficient": 0.1},
                        {"name": "*", "coefficient": 0.2},
                    ],
                }
            ),
            encoding="utf-8",
        )

        config = load_session_config(path)

        assert config.initial_balance == Decimal("10.1")
        assert config.build_catalog().get("A").coefficient == Decimal("0.1")

    def test_contract_violation(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"dimensions": {"rows": -1, "columns": 3}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_session_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_session_config(tmp_path / "absent.json")
