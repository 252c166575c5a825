"""
Contract Validation Module

Validation of persisted calculator inputs against JSON Schema contracts.
"""

from .validators import (
    CALCULATORS,
    CalculatorInputsValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculator_inputs,
)

__all__ = [
    # Constants
    "CALCULATORS",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculatorInputsValidator",
    # Functions
    "validate_calculator_inputs",
]
