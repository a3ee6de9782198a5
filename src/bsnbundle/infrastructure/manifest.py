"""Release manifest (``package.json``) reading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bsnbundle.errors import ConfigurationError


def read_manifest(path: Path) -> dict[str, Any]:
    """Load the JSON manifest at *path*.

    Returns an empty dict when the file does not exist so explicit
    configuration can stand in for it.

    Raises:
        ConfigurationError: If the file exists but is not a JSON object.
    """
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Invalid manifest {path}: {exc}"
        raise ConfigurationError(msg, code="MANIFEST_INVALID") from exc
    if not isinstance(data, dict):
        msg = f"Invalid manifest {path}: expected a JSON object"
        raise ConfigurationError(msg, code="MANIFEST_INVALID")
    return data
