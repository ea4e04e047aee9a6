"""
JSON Schema Contract Validators

Валидация отображаемых полей значения (FloatView.model_dump()) в два этапа:
1. Структура и форматы строк — JSON Schema (schema/float_view.json, Draft 2020-12)
2. Согласованность полей между собой — то, что схема выразить не может:
   - длина binary = bits + 2
   - sign_bit + exponent_field + mantissa_field = binary без префикса
   - длина exponent_field соответствует формату
   - hexadecimal — тот же шаблон в верхнем регистре
   - hidden_bit: " " при экспоненте из единиц, "0" при нулевой, иначе "1"

Второй этап выполняется только если данные прошли схему.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from floatcodec.core.domain.format_params import format_params


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.

    По умолчанию читает схемы, поставляемые внутри пакета (schema/ рядом
    с этим модулем); другой каталог передаётся явно.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


@lru_cache(maxsize=None)
def _package_loader() -> SchemaLoader:
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Схема контракта плюс проверки согласованности, заданные подклассом.

    Ошибки обоих этапов — jsonschema.ValidationError, так что вызывающий
    код обрабатывает их одинаково.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _package_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def consistency_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Проверки между полями; вызываются только для данных, прошедших схему."""
        return iter(())

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки: сначала схемы (по порядку путей), затем согласованности."""
        schema_errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        if schema_errors:
            yield from schema_errors
        else:
            yield from self.consistency_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантная ошибка, если данные не валидны
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Ошибки в виде строк "$.поле: сообщение" (пустой список — данные валидны)."""
        return [f"{error.json_path}: {error.message}" for error in self.iter_errors(data)]


def _field_error(field: str, message: str) -> ValidationError:
    return ValidationError(message, path=[field])


class FloatViewValidator(ContractValidator):
    """Валидатор для float_view контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("float_view", loader)

    def consistency_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        params = format_params(data["bits"])
        pattern = data["binary"][2:]

        if len(pattern) != params.total_bits:
            yield _field_error(
                "binary", f"expected {params.total_bits} bits, got {len(pattern)}"
            )
            return

        exponent_field = data["exponent_field"]
        if len(exponent_field) != params.exponent_bits:
            yield _field_error(
                "exponent_field",
                f"expected {params.exponent_bits} bits, got {len(exponent_field)}",
            )
        if data["sign_bit"] + exponent_field + data["mantissa_field"] != pattern:
            yield _field_error("binary", "sign, exponent and mantissa fields do not match the pattern")

        expected_hex = "0x" + format(int(pattern, 2), f"0{params.hex_digits}X")
        if data["hexadecimal"] != expected_hex:
            yield _field_error(
                "hexadecimal", f"{data['hexadecimal']!r} does not match binary ({expected_hex})"
            )

        if "0" not in exponent_field:
            expected_hidden = " "
        elif "1" not in exponent_field:
            expected_hidden = "0"
        else:
            expected_hidden = "1"
        if data["hidden_bit"] != expected_hidden:
            yield _field_error(
                "hidden_bit", f"expected {expected_hidden!r} for exponent field {exponent_field}"
            )


@lru_cache(maxsize=None)
def float_view_validator() -> FloatViewValidator:
    """Общий экземпляр валидатора для схемы из пакета."""
    return FloatViewValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_float_view(data: Dict[str, Any]) -> None:
    """
    Валидация float_view данных.

    Args:
        data: Данные для валидации (обычно FloatView.model_dump())

    Raises:
        ValidationError: Если данные не соответствуют схеме или поля
            не согласованы между собой
    """
    float_view_validator().validate(data)


def float_view_errors(data: Dict[str, Any]) -> List[str]:
    """Все нарушения контракта float_view в виде строк; [] для валидных данных."""
    return float_view_validator().error_messages(data)
