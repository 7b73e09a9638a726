"""
Тесты для JSON Schema контрактов

Проверяет:
1. Загрузку и meta-валидацию схем
2. Валидацию структурированной формы (rational.json)
3. Валидацию текстового литерала (схема из грамматики парсера)
4. Согласованность контрактов с RationalValue и парсером
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from exact_arithmetic.core.contracts import (
    LITERAL_SCHEMA_PATTERN,
    SCHEMA_DIR,
    RationalLiteralValidator,
    RationalValidator,
    SchemaLoader,
    rational_literal_schema,
    validate_rational,
    validate_rational_literal,
)
from exact_arithmetic.core.domain import RationalValue
from exact_arithmetic.core.math.rational import LITERAL_REGEX, Rational, parse_rational


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_loads_rational_schema(self) -> None:
        schema = SchemaLoader().load_schema("rational")
        assert schema["title"] == "Rational"
        assert schema["required"] == ["numerator", "denominator"]

    def test_caches_schema(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("rational_literal") is loader.load_schema("rational_literal")

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema 'broken'"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_dir_shipped_with_package(self) -> None:
        assert (SCHEMA_DIR / "rational.json").exists()

    def test_available_lists_file_and_generated_schemas(self) -> None:
        assert SchemaLoader().available() == ["rational", "rational_literal"]

    def test_literal_schema_generated(self) -> None:
        schema = SchemaLoader().load_schema("rational_literal")
        assert schema == rational_literal_schema()
        assert not (SCHEMA_DIR / "rational_literal.json").exists()


# =============================================================================
# RATIONAL CONTRACT
# =============================================================================


class TestRationalContract:
    """Тесты для rational.json"""

    def test_valid_data(self) -> None:
        validate_rational({"numerator": 3, "denominator": 4})
        validate_rational({"numerator": -5, "denominator": 1})

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"numerator": 3})

    def test_zero_denominator(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"numerator": 3, "denominator": 0})

    def test_non_integer_field(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"numerator": "3", "denominator": 4})
        with pytest.raises(ValidationError):
            validate_rational({"numerator": 1.5, "denominator": 4})

    def test_additional_properties(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"numerator": 3, "denominator": 4, "sign": "+"})

    def test_error_messages(self) -> None:
        messages = RationalValidator().error_messages({"numerator": "x", "denominator": -1})
        assert len(messages) == 2
        assert messages[0].startswith("/denominator: ")
        assert messages[1].startswith("/numerator: ")

    def test_error_messages_empty_for_valid_data(self) -> None:
        assert RationalValidator().error_messages({"numerator": 1, "denominator": 2}) == []

    def test_model_dump_satisfies_contract(self) -> None:
        validator = RationalValidator()
        for r in (Rational(), Rational(6, 8), Rational(-22, 7), Rational(9)):
            assert validator.is_valid(RationalValue.from_rational(r).model_dump())


# =============================================================================
# RATIONAL LITERAL CONTRACT
# =============================================================================


class TestRationalLiteralContract:
    """Тесты для контракта текстового литерала"""

    @pytest.mark.parametrize("text", ["3/4", "-3/-6", "+5", " 42", "7/ 2"])
    def test_valid_literals(self, text: str) -> None:
        validate_rational_literal(text)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "7/", "7 /2", "1/2/3", "1.5", "7/0x", "42 ", "3/4\n", "\t7/2\n"],
    )
    def test_invalid_literals(self, text: str) -> None:
        with pytest.raises(ValidationError):
            validate_rational_literal(text)

    def test_non_string(self) -> None:
        assert not RationalLiteralValidator().is_valid(12)

    def test_formatted_output_satisfies_contract(self) -> None:
        validator = RationalLiteralValidator()
        for r in (Rational(), Rational(6, 8), Rational(-22, 7), Rational(9)):
            text = str(r)
            assert validator.is_valid(text)
            assert parse_rational(text) == r

    def test_pattern_derived_from_parser_grammar(self) -> None:
        """Контракт и парсер используют одно регулярное выражение"""
        assert LITERAL_REGEX in LITERAL_SCHEMA_PATTERN
        assert rational_literal_schema()["pattern"] == LITERAL_SCHEMA_PATTERN

    @pytest.mark.parametrize(
        "text",
        ["3/4", " -3/-6", "+5", "7/ 2", "42 ", "3/4\n", "7 /2", "1/2/3", "x"],
    )
    def test_contract_agrees_with_parser(self, text: str) -> None:
        validator = RationalLiteralValidator()
        try:
            parse_rational(text)
            parsed = True
        except ValueError:
            parsed = False
        assert validator.is_valid(text) == parsed
