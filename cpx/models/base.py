"""Base model for all cpx Pydantic models.

All cpx models describe a single copy operation and are never mutated once
built, so the base model is frozen.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CpxBaseModel(BaseModel):
    """Base model class for all cpx Pydantic models."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with JSON-compatible values.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")
