"""
Model construction helper.

Pydantic reports bad field values as ValidationError; callers of the engines
expect the library-wide InvalidInput instead.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from fintoolkit.core.errors import InvalidInput

ModelT = TypeVar("ModelT", bound=BaseModel)


def build(model_cls: type[ModelT], **fields: Any) -> ModelT:
    """
    Construct a value object, re-raising validation failures as InvalidInput.

    Args:
        model_cls: Pydantic model class
        **fields: Field values

    Returns:
        Validated, immutable model instance

    Raises:
        InvalidInput: if any field violates its constraints
    """
    try:
        return model_cls(**fields)
    except ValidationError as e:
        raise InvalidInput(f"Invalid {model_cls.__name__}: {e}") from e
