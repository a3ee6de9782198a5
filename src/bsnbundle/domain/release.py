"""Release metadata stamped into every bundle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseInfo:
    """Read-only release constants, built once per run.

    Attributes:
        product: Human-readable product name used in the header.
        version: Bare version string (``"2.0.27"``), stamped as ``BSN.version``.
        license: License identifier from the manifest (``"MIT"``).
        copyright: Copyright holder shown in the header.
    """

    product: str
    version: str
    license: str
    copyright: str

    @property
    def version_tag(self) -> str:
        return f"v{self.version}"

    @property
    def license_tag(self) -> str:
        return f"{self.license}-License"
