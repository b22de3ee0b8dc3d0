"""Config layer facade: catalog state and read operations."""

from recfilter.models import FieldCatalog, FieldConfig

from .catalog import field_keys, field_paths, get_field, has_field, new_condition
from .core import catalog_path, ensure, require, reset, use

set_catalog_path = use

__all__ = [
    "FieldCatalog",
    "FieldConfig",
    "catalog_path",
    "ensure",
    "field_keys",
    "field_paths",
    "get_field",
    "has_field",
    "new_condition",
    "require",
    "reset",
    "set_catalog_path",
    "use",
]
