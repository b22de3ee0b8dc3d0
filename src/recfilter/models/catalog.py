"""Field catalog models: which fields are filterable and how."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .conditions import CONDITION_MODELS, ConditionBase
from .operators import operators_for
from .types import FieldType


class FieldConfig(BaseModel):
    """One filterable field.

    ``path`` is the dotted path into the record for nested fields (for
    example ``address.city``); when omitted the key itself is the path.
    """

    key: str
    label: str
    type: FieldType
    operators: List[str]
    options: List[str] | None = None
    path: str | None = None

    @model_validator(mode="after")
    def operators_match_type(self) -> "FieldConfig":
        """Ensure every operator is wired for the field type."""

        allowed = operators_for(self.type)
        unknown = [op for op in self.operators if op not in allowed]
        if unknown:
            raise ValueError(
                f"Operators {unknown} are not valid for {self.type} field '{self.key}'"
            )
        if not self.operators:
            raise ValueError(f"Field '{self.key}' declares no operators")
        return self


class FieldCatalog(BaseModel):
    """Root catalog document."""

    fields: List[FieldConfig] = Field(default_factory=list)
    catalog_path: Path | None = Field(default=None, exclude=True)

    @field_validator("fields")
    @classmethod
    def keys_unique(cls, v: List[FieldConfig]) -> List[FieldConfig]:
        """Ensure keys are unique."""

        keys = [f.key for f in v]
        if len(keys) != len(set(keys)):
            raise ValueError("Duplicate field keys are not allowed")
        return v

    def get_field(self, key: str) -> FieldConfig | None:
        """Get field by key, or None if not found."""

        return next((f for f in self.fields if f.key == key), None)

    def has_field(self, key: str) -> bool:
        return any(f.key == key for f in self.fields)

    def keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.fields)

    def field_paths(self) -> Dict[str, str]:
        """Mapping of field key to dotted path for fields that declare one."""

        return {f.key: f.path for f in self.fields if f.path}

    def allows(self, condition: ConditionBase) -> bool:
        """Check that the condition's field, type and operator fit the catalog."""

        field = self.get_field(condition.field)
        if field is None:
            return False
        return (
            str(field.type) == str(condition.field_type)
            and condition.operator in field.operators
        )

    def new_condition(self, key: str, operator: str | None = None) -> ConditionBase:
        """Create a condition for ``key`` carrying the default payload.

        Uses the field's first operator unless ``operator`` is given.

        Raises:
            KeyError: ``key`` is not in the catalog.
            ValueError: ``operator`` is not allowed for the field.
        """

        field = self.get_field(key)
        if field is None:
            raise KeyError(key)
        if operator is None:
            operator = field.operators[0]
        elif operator not in field.operators:
            raise ValueError(f"Operator '{operator}' is not allowed for '{key}'")
        return CONDITION_MODELS[field.type](field=key, operator=operator)


__all__ = ["FieldCatalog", "FieldConfig"]
