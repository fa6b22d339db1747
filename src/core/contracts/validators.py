"""
Контракты сериализованных частот и диапазонов

Частоты и диапазоны передаются внешнему слою политики частот по значению,
в виде dict (Fps.model_dump()). Схема контракта выводится из самой модели
(model_json_schema) и ужесточается: все поля обязательны, лишние запрещены.
Отдельных файлов схем нет, поэтому контракт не расходится с моделью.
"""

import logging
from typing import Any, Dict, Iterator, Type, Union

from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.core.domain.fps import Fps
from src.core.domain.fps_range import FpsRange, FpsRanges

logger = logging.getLogger(__name__)

ContractModel = Union[Type[Fps], Type[FpsRange], Type[FpsRanges]]

CONTRACT_MODELS = (Fps, FpsRange, FpsRanges)


# =============================================================================
# ПОСТРОЕНИЕ СХЕМЫ
# =============================================================================


def build_contract_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    JSON Schema контракта для модели.

    Берётся serialization-схема pydantic, затем каждый объект (корень и
    $defs) получает required = все свойства и additionalProperties = false:
    dict, полученный из model_dump(), всегда содержит все поля.

    Args:
        model: Класс модели из CONTRACT_MODELS

    Returns:
        Схема draft 2020-12

    Raises:
        TypeError: Если модель не является контрактной
    """
    if model not in CONTRACT_MODELS:
        raise TypeError(f"No contract for {getattr(model, '__name__', model)!r}")

    schema = model.model_json_schema(mode="serialization")
    for node in [schema, *schema.get("$defs", {}).values()]:
        if node.get("type") == "object" and "properties" in node:
            node["required"] = sorted(node["properties"])
            node["additionalProperties"] = False
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"

    Draft202012Validator.check_schema(schema)
    return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Валидатор dict против контракта модели.

    Экземпляры кэшируются по модели: ContractValidator.for_model(Fps).
    """

    _cache: Dict[type, "ContractValidator"] = {}

    def __init__(self, model: ContractModel):
        self.model = model
        self.schema = build_contract_schema(model)
        self.validator = Draft202012Validator(self.schema)
        logger.debug("Built %s contract schema", model.__name__)

    @classmethod
    def for_model(cls, model: ContractModel) -> "ContractValidator":
        validator = cls._cache.get(model)
        if validator is None:
            validator = cls._cache[model] = cls(model)
        return validator

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против контракта.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("%s contract violation: %s", self.model.__name__, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


def validate_contract(model: ContractModel, data: Dict[str, Any]) -> None:
    """
    Валидация dict против контракта модели.

    Args:
        model: Fps, FpsRange или FpsRanges
        data: Сериализованное значение

    Raises:
        ValidationError: Если данные не соответствуют контракту
        TypeError: Если модель не является контрактной
    """
    ContractValidator.for_model(model).validate(data)
