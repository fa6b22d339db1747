"""
Contract Validation Module

Валидация и (де)сериализация частот и диапазонов по контрактам,
выведенным из pydantic моделей.
"""

from .serialization import (
    fps_from_dict,
    fps_range_from_dict,
    fps_range_to_dict,
    fps_ranges_from_dict,
    fps_ranges_to_dict,
    fps_to_dict,
)
from .validators import (
    CONTRACT_MODELS,
    ContractValidator,
    build_contract_schema,
    validate_contract,
)

__all__ = [
    # Validation
    "CONTRACT_MODELS",
    "ContractValidator",
    "build_contract_schema",
    "validate_contract",
    # Serialization
    "fps_to_dict",
    "fps_from_dict",
    "fps_range_to_dict",
    "fps_range_from_dict",
    "fps_ranges_to_dict",
    "fps_ranges_from_dict",
]
