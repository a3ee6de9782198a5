"""Locate the ``bsnbundle.toml`` that configures a run.

Lookup order: the ``--config`` flag, then ``BSNBUNDLE_CONFIG``, then the
nearest ``bsnbundle.toml`` in the start directory or one of its parents.
The directory holding the file becomes the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

from bsnbundle.errors import ConfigurationError

CONFIG_FILENAME = "bsnbundle.toml"
CONFIG_ENV_VAR = "BSNBUNDLE_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file for a run, or None to use code defaults.

    A path named by *explicit* or by the environment must exist; only the
    walk-up search is allowed to come back empty.

    Raises:
        ConfigurationError: If an explicitly named config file is missing.
    """
    named_sources = (
        (explicit, "--config"),
        (os.environ.get(CONFIG_ENV_VAR), CONFIG_ENV_VAR),
    )
    for named, origin in named_sources:
        if not named:
            continue
        path = Path(named)
        if not path.is_file():
            msg = f"Config file from {origin} not found: {path}"
            raise ConfigurationError(msg, code="CONFIG_NOT_FOUND")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
