"""
JSON Schema Contract Validators

Валидация JSON payloads по схемам из contracts/schema/ (jsonschema, Draft 2020-12):
- numeral.json          — numeral как {"value": n}
- division_result.json  — результат деления (quotient или ошибка)
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from peano.core.domain.numeral import PeanoNumeral
from peano.core.math.safeguards import NATURAL_FLOOR, validate_in_range

logger = logging.getLogger(__name__)

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Максимальное значение numeral, принимаемое из payload.
# Совпадает с "maximum" в numeral.json и division_result.json.
PAYLOAD_VALUE_MAX: Final[int] = 1_000_000


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema (с кэшем).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема сама по себе невалидна
    """
    schema_path = schema_dir / f"{schema_name}.json"
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    logger.debug("Loaded schema %s from %s", schema_name, schema_path)
    return schema


class ContractValidator:
    """Валидатор данных против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("Payload rejected by %s: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


NUMERAL_VALIDATOR = ContractValidator("numeral")
DIVISION_RESULT_VALIDATOR = ContractValidator("division_result")


def validate_numeral(data: Dict[str, Any]) -> None:
    NUMERAL_VALIDATOR.validate(data)


def validate_division_result(data: Dict[str, Any]) -> None:
    DIVISION_RESULT_VALIDATOR.validate(data)


def numeral_from_payload(data: Dict[str, Any]) -> PeanoNumeral:
    """
    Построение numeral из payload после валидации.

    JSON Schema "integer" принимает и 3.0, поэтому значение приводится к int.

    Raises:
        ValidationError: Если payload не соответствует numeral.json
    """
    validate_numeral(data)
    value = int(data["value"])
    validate_in_range(value, "value", min_value=NATURAL_FLOOR, max_value=PAYLOAD_VALUE_MAX)
    return PeanoNumeral.from_int(value)
