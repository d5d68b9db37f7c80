"""
Contract Validation Module

Модуль для валидации JSON контрактов вычисления Pi.
"""

from .validators import (
    ContractValidator,
    MachinIdentityValidator,
    PiRequestValidator,
    PiResultValidator,
    SchemaLoader,
    validate_machin_identity,
    validate_pi_request,
    validate_pi_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MachinIdentityValidator",
    "PiRequestValidator",
    "PiResultValidator",
    # Functions
    "validate_machin_identity",
    "validate_pi_request",
    "validate_pi_result",
]
