"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов поиска максимального произведения.
"""

from .validators import (
    ContractValidator,
    MaxProductResultValidator,
    SchemaLoader,
    get_default_loader,
    packaged_schema_dir,
    validate_max_product_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MaxProductResultValidator",
    # Functions
    "get_default_loader",
    "packaged_schema_dir",
    "validate_max_product_result",
]
