"""Module directory access.

INVARIANT: Files are truth. The module universe is listed fresh on every
run and never cached across runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from bsnbundle.domain.names import is_module_filename, module_key, module_name_from_filename
from bsnbundle.errors import ConfigurationError, ModuleReadError


@dataclass(frozen=True)
class ModuleUniverse:
    """Ordered mapping of module name to source file."""

    files: dict[str, Path]

    @property
    def names(self) -> list[str]:
        return list(self.files)

    def path_for(self, name: str) -> Path:
        return self.files[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


def discover_modules(module_dir: Path) -> ModuleUniverse:
    """List every ``*-native.js`` module in *module_dir*, sorted by filename.

    Raises:
        ConfigurationError: If the directory is missing, or two files
            normalize to the same module name.
    """
    if not module_dir.is_dir():
        msg = f"Module directory not found: {module_dir}"
        raise ConfigurationError(msg, code="MODULE_DIR_MISSING")

    files: dict[str, Path] = {}
    seen: dict[str, Path] = {}
    for path in sorted(module_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file() or not is_module_filename(path.name):
            continue
        name = module_name_from_filename(path.name)
        key = module_key(name)
        if key in seen:
            msg = f"Module name {name!r} is provided by both {seen[key].name} and {path.name}"
            raise ConfigurationError(msg, code="DUPLICATE_MODULE")
        seen[key] = path
        files[name] = path
    return ModuleUniverse(files)


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        ModuleReadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ModuleReadError(path, str(exc)) from exc
