"""Catalog state: resolve, validate and cache the active field catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from recfilter.errors import CatalogError
from recfilter.home import load_json, resolve_catalog_path
from recfilter.models import FieldCatalog

logger = logging.getLogger(__name__)

_ACTIVE: FieldCatalog | None = None


def reset() -> None:
    """Forget the active catalog (primarily for tests)."""

    global _ACTIVE
    _ACTIVE = None


def catalog_path() -> Path | None:
    """Return the file the active catalog was loaded from, if any."""

    return _ACTIVE.catalog_path if _ACTIVE is not None else None


def use(path: Path | str | None = None) -> FieldCatalog:
    """Load the catalog at ``path`` (or the first fallback location) and make it active.

    A file holding a bare list is read as the list of fields.

    Raises:
        CatalogError: the file is missing, not JSON, or not a valid catalog.
    """

    global _ACTIVE
    source = resolve_catalog_path(Path(path) if path is not None else None)
    try:
        data = load_json(source)
        catalog = FieldCatalog.model_validate(
            {"fields": data} if isinstance(data, list) else data
        )
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog {source} is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {source}: {exc}") from exc

    catalog.catalog_path = source
    _ACTIVE = catalog
    logger.debug("Loaded %d catalog fields from %s", len(catalog.fields), source)
    return catalog


def ensure(path: Path | str | None = None) -> FieldCatalog:
    """Return the active catalog, loading it first when needed or when ``path`` is given."""

    if path is not None or _ACTIVE is None:
        return use(path)
    return _ACTIVE


def require() -> FieldCatalog:
    """Return the active catalog, loading it from the fallback locations if necessary."""

    return ensure(None)


__all__ = ["catalog_path", "ensure", "require", "reset", "use"]
