"""
JSON Schema Contract Validators

Валидация внешних данных с рациональными числами по формальным JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- rational          — структурированная форма {"numerator", "denominator"},
                      файл schema/rational.json
- rational_literal  — текстовый литерал "n" или "n/d", строится из LITERAL_REGEX
                      парсера, поэтому грамматики контракта и парсера совпадают

Контракт проверяет только форму данных. Каноничность пары и ненулевой
делитель литерала проверяются при конструировании RationalValue/Rational.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Final, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from exact_arithmetic.core.math.rational import LITERAL_REGEX

# Каталог файловых схем поставляется вместе с пакетом
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

JSON_SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"

# (?![\s\S]) — конец строки и в ECMA-262, и в re (в re "$" пропускает финальный "\n")
LITERAL_SCHEMA_PATTERN: Final[str] = "^(?:" + LITERAL_REGEX + r")(?![\s\S])"


def rational_literal_schema() -> Dict[str, Any]:
    """
    JSON Schema текстового литерала.

    Returns:
        Схема со строковым pattern, производным от LITERAL_REGEX
    """
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": "rational_literal.json",
        "title": "RationalLiteral",
        "description": (
            "Text form of a rational: an optionally signed integer, optionally "
            "followed by '/' and an optionally signed integer divisor."
        ),
        "type": "string",
        "pattern": LITERAL_SCHEMA_PATTERN,
    }


# Схемы, которые строятся в коде, а не читаются из SCHEMA_DIR
_GENERATED_SCHEMAS: Final[Dict[str, Callable[[], Dict[str, Any]]]] = {
    "rational_literal": rational_literal_schema,
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Источник JSON Schema по имени.

    Сначала ищет среди схем, построенных в коде, затем файл
    <schema_dir>/<name>.json. Каждая схема проходит meta-валидацию один раз
    и кэшируется.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = Path(schema_dir)
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена всех доступных схем."""
        names = set(_GENERATED_SCHEMAS)
        names.update(path.stem for path in self._schema_dir.glob("*.json"))
        return sorted(names)

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'rational')

        Returns:
            Схема как dict

        Raises:
            FileNotFoundError: Если схема не найдена
            ValueError: Если схема не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        build = _GENERATED_SCHEMAS.get(schema_name)
        schema = build() if build is not None else self._read(schema_name)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema '{schema_name}': {e.message}") from e

        self._cache[schema_name] = schema
        return schema

    def _read(self, schema_name: str) -> Dict[str, Any]:
        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        return json.loads(schema_path.read_text(encoding="utf-8"))


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка данных против одной JSON Schema.

    Attributes:
        schema_name: Имя контракта (для диагностики)
        schema: Схема как dict
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первая найденная ошибка
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def error_messages(self, data: Any) -> List[str]:
        """
        Все нарушения контракта в виде "<путь>: <сообщение>".

        Путь — JSON Pointer до поля, "/" для корня. Порядок детерминирован
        (сортировка по пути).
        """
        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
        return [
            "/" + "/".join(str(part) for part in error.path) + f": {error.message}"
            for error in errors
        ]


class RationalValidator(ContractValidator):
    """Контракт структурированной формы {"numerator", "denominator"}."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("rational", loader)


class RationalLiteralValidator(ContractValidator):
    """Контракт текстового литерала."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("rational_literal", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют rational
    """
    RationalValidator().validate(data)


def validate_rational_literal(data: str) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если строка не является литералом
    """
    RationalLiteralValidator().validate(data)
