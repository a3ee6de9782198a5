"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bsnbundle.toml only contains
overrides. A checkout of the library needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- bsnbundle.toml sections ---


class BundleConfig(BaseModel):
    """[bundle] section. Paths are relative to the project root."""

    model_config = {"frozen": True}

    module_dir: str = "lib/V4"
    utilities: str = "utils.js"
    init: str = "utils-init.js"
    max_workers: int | None = Field(default=None, ge=1)
    template_dir: str | None = None


class ReleaseConfig(BaseModel):
    """[release] section.

    ``version`` and ``license`` override the values read from ``manifest``.
    """

    model_config = {"frozen": True}

    manifest: str = "package.json"
    product: str = "Native Javascript for Bootstrap 4"
    copyright: str = "dnp_theme"
    version: str | None = None
    license: str | None = None
