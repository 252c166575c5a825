"""
JSON Schema Contract Validators

Validates the calculator input snapshots that the UI remembers between
sessions against JSON Schema contracts. Uses the jsonschema library.

Schemas (schema/<calculator>_inputs.json):
- tax: overseas income quota
- loan: loan payment / grace period
- compound: compound interest
- dca: periodic investment
- irr: insurance policy IRR
- fcn: structured note barriers
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

CALCULATORS: Final[tuple[str, ...]] = ("tax", "loan", "compound", "dca", "irr", "fcn")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas ship inside the package under contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'loan_inputs')

        Returns:
            Parsed schema

        Raises:
            FileNotFoundError: if the schema file does not exist
            ValueError: if the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Module-wide loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator for one schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: if the data does not match
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Validity check without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every validation error in data."""
        return self.validator.iter_errors(data)


class CalculatorInputsValidator(ContractValidator):
    """Validator for one calculator's remembered inputs."""

    def __init__(self, calculator: str):
        if calculator not in CALCULATORS:
            raise ValueError(f"Unknown calculator {calculator!r}; expected one of {CALCULATORS}")
        self.calculator = calculator
        super().__init__(f"{calculator}_inputs")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_calculator_inputs(calculator: str, data: Dict[str, Any]) -> None:
    """
    Validate a calculator input snapshot.

    Args:
        calculator: One of CALCULATORS
        data: Snapshot to validate

    Raises:
        ValueError: unknown calculator
        ValidationError: if the snapshot does not match its schema
    """
    CalculatorInputsValidator(calculator).validate(data)


__all__ = [
    "CALCULATORS",
    "SchemaLoader",
    "ContractValidator",
    "CalculatorInputsValidator",
    "ValidationError",
    "validate_calculator_inputs",
]
