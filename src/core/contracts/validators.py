"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- machin_identity.json (формула Pi/4 = Σ m_i·arctan(1/p_i))
- pi_request.json (запрос на вычисление)
- pi_result.json (результат вычисления)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'pi_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)


class MachinIdentityValidator(ContractValidator):
    def __init__(self):
        super().__init__("machin_identity")


class PiRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("pi_request")


class PiResultValidator(ContractValidator):
    """
    Валидатор результата.

    Помимо схемы проверяет, что decimal содержит ровно digits знаков после
    запятой.
    """

    def __init__(self):
        super().__init__("pi_result")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        fraction = data["decimal"].split(".", 1)[1]
        if len(fraction) != data["digits"]:
            raise ValidationError(
                f"decimal has {len(fraction)} fraction digits, expected {data['digits']}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_machin_identity(data: Dict[str, Any]) -> None:
    """
    Валидация machin_identity данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MachinIdentityValidator().validate(data)


def validate_pi_request(data: Dict[str, Any]) -> None:
    """
    Валидация pi_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PiRequestValidator().validate(data)


def validate_pi_result(data: Dict[str, Any]) -> None:
    """
    Валидация pi_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PiResultValidator().validate(data)
