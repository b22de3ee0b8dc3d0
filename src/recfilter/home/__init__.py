"""Home layer: catalog path resolution and file I/O (no Pydantic dependencies)."""

import json
import os
from importlib import resources
from pathlib import Path
from typing import Any, Optional

CATALOG_ENV = "RECFILTER_CATALOG"
CATALOG_FILENAMES = (".recfilter.json", "recfilter.json")
BUNDLED_CATALOG = "employee_fields.json"


def bundled_catalog_path() -> Path:
    """Path of the employee field catalog shipped with the package."""
    return Path(str(resources.files("recfilter").joinpath("data", BUNDLED_CATALOG)))


def resolve_catalog_path(cli_path: Optional[Path] = None) -> Path:
    """
    Resolve the field catalog path with precedence:
    1. Explicit path (CLI --catalog)
    2. RECFILTER_CATALOG env var
    3. CWD: .recfilter.json or recfilter.json (prefer .recfilter.json)
    4. Bundled employee catalog
    """
    if cli_path:
        return cli_path

    env = os.getenv(CATALOG_ENV)
    if env:
        return Path(env).expanduser()

    cwd = Path.cwd()
    for name in CATALOG_FILENAMES:
        p = cwd / name
        if p.exists():
            return p

    return bundled_catalog_path()


def load_json(path: Path) -> Any:
    """Load and parse JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


__all__ = [
    "BUNDLED_CATALOG",
    "CATALOG_ENV",
    "bundled_catalog_path",
    "load_json",
    "resolve_catalog_path",
]
