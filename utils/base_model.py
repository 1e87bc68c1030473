# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for all geometry and settings models.

    All value types inherit from this class to get consistent behavior:
    - Immutability: instances are frozen after creation, so a geometry handed
      to an operation cannot be changed underneath it
    - Strictness: unknown fields are rejected instead of silently dropped
    - Copyability: modified copies via with_changes()
    """
    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New, re-validated instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        # Shallow field mapping keeps nested models as instances
        current_data = {name: getattr(self, name) for name in type(self).model_fields}

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__
        return cast(T, cls.model_validate(current_data))
