"""bsnbundle — module bundler for Native Javascript for Bootstrap."""

from __future__ import annotations

__version__ = "0.1.0"


def build_bundle(
    *,
    only: list[str] | None = None,
    ignore: list[str] | None = None,
    minify: bool = False,
) -> str:
    """Build a bundle and return it as text.

    Nothing is written to stdout; the caller owns the artifact. Raises
    :class:`~bsnbundle.errors.BundleError` when the build fails.
    """
    from bsnbundle.config.settings import BundleSettings
    from bsnbundle.errors import BundleError
    from bsnbundle.services.build import BuildOptions, BuildService

    options = BuildOptions(only=only, ignore=ignore, minify=minify, cli=False)
    result = BuildService(BundleSettings.from_cli()).build(options)
    if not result.ok:
        assert result.error is not None
        raise BundleError(
            result.error.message, code=result.error.code, warnings=result.warnings
        )
    return result.data["bundle"]
