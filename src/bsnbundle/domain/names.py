"""Module name normalization.

Module files follow the ``<name>-native.js`` convention. User input may
carry the same suffix (``--only button-native.js``) or none at all; both
normalize to the same comparable name.
"""

from __future__ import annotations

from collections.abc import Iterable

MODULE_SUFFIX = "-native.js"

# Longest first so "-native.js" wins over ".js".
_STRIPPABLE_SUFFIXES = (MODULE_SUFFIX, "-native", ".js")


def strip_module_suffix(raw: str) -> str:
    """Remove a trailing module marker, leaving anything else unchanged.

    Examples:
        >>> strip_module_suffix("button-native.js")
        'button'
        >>> strip_module_suffix("Modal")
        'Modal'
        >>> strip_module_suffix("utils.js")
        'utils'
    """
    for suffix in _STRIPPABLE_SUFFIXES:
        if raw.endswith(suffix) and len(raw) > len(suffix):
            return raw[: -len(suffix)]
    return raw


def normalize_module_names(raws: Iterable[str]) -> list[str]:
    """Strip module markers from every name, keeping order and duplicates."""
    return [strip_module_suffix(raw) for raw in raws]


def module_name_from_filename(filename: str) -> str:
    """Derive the canonical module name from a source filename.

    Examples:
        >>> module_name_from_filename("button-native.js")
        'Button'
        >>> module_name_from_filename("scroll-spy-native.js")
        'ScrollSpy'
    """
    stem = strip_module_suffix(filename)
    return "".join(part[:1].upper() + part[1:] for part in stem.split("-") if part)


def module_key(name: str) -> str:
    """Comparison key for a module name, ignoring case and hyphens.

    Examples:
        >>> module_key("scroll-spy") == module_key("ScrollSpy")
        True
    """
    return name.replace("-", "").casefold()


def is_module_filename(filename: str) -> bool:
    """Check whether *filename* names a module source file."""
    return filename.endswith(MODULE_SUFFIX) and len(filename) > len(MODULE_SUFFIX)
