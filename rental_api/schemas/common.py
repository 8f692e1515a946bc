# rental_api/schemas/common.py
from typing import Any, ClassVar, Dict, FrozenSet
from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """Base for update payloads: every field optional, but a field that is
    required on create may not be explicitly set to null."""

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        for field in sorted(self.non_nullable & self.model_fields_set):
            if getattr(self, field) is None:
                raise ValueError(f"{field} is required and cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(include=self.model_fields_set)
