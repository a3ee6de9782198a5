"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from bsnbundle.domain.bundle import BundleLayout

WRAPPER_TEMPLATE = "umd.js.j2"


def build_template_environment(group: str, *, template_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are looked up in *template_dir* (namespaced by *group* first,
    then flat). Autoescaping stays off: the templates emit JavaScript.
    """

    loaders: list[BaseLoader] = []
    if template_dir is not None:
        loaders.append(FileSystemLoader([str(template_dir / group), str(template_dir)]))

    loaders.append(PackageLoader("bsnbundle", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), autoescape=False)


def render_bundle(layout: BundleLayout, env: Environment) -> str:
    """Render the UMD wrapper body (header excluded)."""
    return env.get_template(WRAPPER_TEMPLATE).render(layout=layout)
