"""Selection filters and module set resolution.

A :data:`SelectionFilter` is built once from the raw ``only``/``ignore``
options. Downstream code never sees both at the same time.

INVARIANT: A resolved :class:`Selection` is never empty.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from bsnbundle.domain.names import module_key, normalize_module_names
from bsnbundle.errors import ConfigurationError


@dataclass(frozen=True)
class AllowList:
    """Include only these modules, in this order."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class DenyList:
    """Include every module except these."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class NoFilter:
    """Include every module."""


SelectionFilter = AllowList | DenyList | NoFilter


@dataclass(frozen=True)
class Selection:
    """Ordered modules to bundle plus non-fatal warnings raised on the way."""

    modules: tuple[str, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)


def build_selection_filter(
    only: Sequence[str] | None = None,
    ignore: Sequence[str] | None = None,
) -> SelectionFilter:
    """Build the selection filter for a run.

    ``None`` means "not given". An empty list is still a given option, so
    ``only=[]`` yields an allow-list that resolves to nothing.

    Raises:
        ConfigurationError: If both *only* and *ignore* are given.
    """
    if only is not None and ignore is not None:
        msg = "You cannot specify both --only and --ignore."
        raise ConfigurationError(msg, code="CONFIG_CONFLICT")
    if only is not None:
        return AllowList(tuple(normalize_module_names(only)))
    if ignore is not None:
        return DenyList(tuple(normalize_module_names(ignore)))
    return NoFilter()


def resolve_selection(universe: Sequence[str], selection_filter: SelectionFilter) -> Selection:
    """Resolve the ordered list of modules to bundle.

    Allow-listed names keep the requested order and take the universe's
    spelling. Unknown allow-list names are dropped with a warning. Repeated
    requests are kept (with a warning), not deduplicated.

    Raises:
        ConfigurationError: If the resolved selection is empty. The warnings
            collected so far travel with it.
    """
    canonical = {module_key(name): name for name in universe}
    warnings: list[str] = []

    match selection_filter:
        case AllowList(names=requested):
            modules: list[str] = []
            seen: set[str] = set()
            for name in requested:
                key = module_key(name)
                if key not in canonical:
                    warnings.append(f"{name} is not a valid module name, continuing")
                    continue
                if key in seen:
                    warnings.append(f"{canonical[key]} requested more than once")
                seen.add(key)
                modules.append(canonical[key])
        case DenyList(names=denied):
            denied_keys = {module_key(name) for name in denied}
            modules = [name for name in universe if module_key(name) not in denied_keys]
        case _:
            modules = list(universe)

    if not modules:
        raise ConfigurationError(
            "No valid module names, aborting", code="NO_MODULES", warnings=warnings
        )
    return Selection(modules=tuple(modules), warnings=tuple(warnings))
