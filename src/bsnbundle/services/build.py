"""BuildService — select, load, assemble, and finalize a bundle.

Pipeline stages, in order:

1. Build the selection filter (rejects ``only`` + ``ignore`` before any I/O).
2. List the module universe and resolve the selection.
3. Read module sources and auxiliary files concurrently.
4. Render the UMD wrapper around them.
5. Optionally minify the body, re-attach the header, and emit.

INVARIANT: A failed build never produces an artifact, partial or otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from pydantic import BaseModel

from bsnbundle.domain.bundle import build_layout
from bsnbundle.domain.release import ReleaseInfo
from bsnbundle.domain.selection import build_selection_filter, resolve_selection
from bsnbundle.errors import BundleError, ConfigurationError, ModuleReadError
from bsnbundle.infrastructure.filesystem import discover_modules
from bsnbundle.infrastructure.loader import load_module_sources
from bsnbundle.infrastructure.manifest import read_manifest
from bsnbundle.infrastructure.minify import Minifier, minify_js
from bsnbundle.infrastructure.templates import build_template_environment, render_bundle
from bsnbundle.services.base import BaseService
from bsnbundle.services.result import ServiceResult

if TYPE_CHECKING:
    from bsnbundle.config.settings import BundleSettings

logger = logging.getLogger(__name__)


class BuildOptions(BaseModel):
    """Per-invocation build options.

    ``only`` and ``ignore`` are mutually exclusive. ``cli`` selects where the
    artifact goes: the primary output stream when True, the caller otherwise.
    """

    model_config = {"frozen": True}

    only: list[str] | None = None
    ignore: list[str] | None = None
    minify: bool = False
    cli: bool = False


def load_release_info(settings: BundleSettings) -> ReleaseInfo:
    """Read release constants once, explicit config taking precedence over the manifest."""
    release = settings.release
    manifest = read_manifest(settings.manifest_path)
    version = release.version or manifest.get("version")
    license_name = release.license or manifest.get("license")
    if not version or not license_name:
        msg = (
            f"No version/license available: set them in [release] or in {settings.manifest_path}"
        )
        raise ConfigurationError(msg, code="MANIFEST_INVALID")
    return ReleaseInfo(
        product=release.product,
        version=str(version),
        license=str(license_name),
        copyright=release.copyright,
    )


def finalize_artifact(
    header: str,
    body: str,
    *,
    minify: bool = False,
    minifier: Minifier = minify_js,
) -> str:
    """Join header and body, minifying only the body when asked.

    The result always ends with exactly one newline.
    """
    if minify:
        body = minifier(body)
    return header + body.rstrip("\n") + "\n"


def emit_artifact(artifact: str, *, cli: bool, stream: IO[bytes] | None = None) -> str | None:
    """Write *artifact* to the primary stream when *cli* is set, else return it."""
    if not cli:
        return artifact
    out = stream if stream is not None else sys.stdout.buffer
    out.write(artifact.encode("utf-8"))
    out.flush()
    return None


class BuildService(BaseService):
    """Build bundles from the configured module directory."""

    def build(self, options: BuildOptions, *, stream: IO[bytes] | None = None) -> ServiceResult:
        """Run the full pipeline for *options*.

        On success ``data`` holds the included ``modules``, the build
        ``mode``, the stamped ``version``, the artifact size in ``bytes``,
        whether it was ``written`` to the stream, and the ``bundle`` text
        when it was not.
        """
        settings = self._settings
        warnings: list[str] = []
        try:
            selection_filter = build_selection_filter(options.only, options.ignore)
            universe = discover_modules(settings.module_dir)
            selection = resolve_selection(universe.names, selection_filter)
            warnings.extend(selection.warnings)
            logger.debug("Resolved modules: %s", ", ".join(selection.modules))

            release = load_release_info(settings)
            paths = [
                settings.utilities_path,
                settings.init_path,
                *(universe.path_for(name) for name in selection.modules),
            ]
            utilities, init, *sources = load_module_sources(
                paths, max_workers=settings.bundle.max_workers
            )
            logger.debug("Loaded %d module sources", len(sources))
        except BundleError as exc:
            logger.debug("Build failed [%s]: %s", exc.code, exc.message)
            if isinstance(exc, ModuleReadError):
                return ServiceResult.failure(
                    "build", exc, warnings=warnings, path=str(exc.path)
                )
            return ServiceResult.failure("build", exc, warnings=warnings)

        layout = build_layout(
            release=release,
            modules=selection.modules,
            sources=sources,
            utilities=utilities,
            init=init,
        )
        env = build_template_environment("bundle", template_dir=settings.template_dir)
        artifact = finalize_artifact(
            layout.header,
            render_bundle(layout, env),
            minify=options.minify,
        )
        logger.debug("Assembled bundle (%d chars, minify=%s)", len(artifact), options.minify)

        returned = emit_artifact(artifact, cli=options.cli, stream=stream)
        data: dict[str, object] = {
            "product": release.product,
            "version": release.version_tag,
            "mode": "minified" if options.minify else "unminified",
            "modules": list(selection.modules),
            "bytes": len(artifact.encode("utf-8")),
            "written": returned is None,
        }
        if returned is not None:
            data["bundle"] = returned
        return ServiceResult(ok=True, op="build", data=data, warnings=warnings)

    def list_modules(self) -> ServiceResult:
        """List the module universe with the file backing each name."""
        try:
            universe = discover_modules(self._settings.module_dir)
        except BundleError as exc:
            return ServiceResult.failure("list_modules", exc)
        return ServiceResult(
            ok=True,
            op="list_modules",
            data={
                "count": len(universe),
                "modules": [
                    {"name": name, "file": universe.path_for(name).name} for name in universe
                ],
            },
        )
