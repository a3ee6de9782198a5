"""BaseService — foundation for all bsnbundle services.

Every service receives the frozen :class:`BundleSettings` at construction
time. Nothing else is shared between runs: each call re-reads the module
directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bsnbundle.config.settings import BundleSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BuildService(BaseService):
            def build(self, options: BuildOptions) -> ServiceResult:
                universe = discover_modules(self._settings.module_dir)
                ...
    """

    def __init__(self, settings: BundleSettings) -> None:
        self._settings = settings
