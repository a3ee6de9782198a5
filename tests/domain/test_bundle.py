"""Tests for bundle layout construction."""

import pytest

from bsnbundle.domain.bundle import build_layout, indent_block, render_header
from bsnbundle.domain.release import ReleaseInfo

RELEASE = ReleaseInfo(
    product="Native Javascript for Bootstrap 4",
    version="2.0.27",
    license="MIT",
    copyright="dnp_theme",
)


class TestReleaseInfo:
    def test_tags(self) -> None:
        assert RELEASE.version_tag == "v2.0.27"
        assert RELEASE.license_tag == "MIT-License"


class TestRenderHeader:
    def test_single_line_with_version_and_license(self) -> None:
        header = render_header(RELEASE)
        assert header == (
            "// Native Javascript for Bootstrap 4 v2.0.27 | © dnp_theme | MIT-License\n"
        )
        assert header.count("\n") == 1


class TestIndentBlock:
    def test_first_line_untouched(self) -> None:
        assert indent_block("a\nb", "  ") == "a\n  b"

    def test_blank_lines_stay_blank(self) -> None:
        assert indent_block("a\n\nb", "  ") == "a\n\n  b"

    def test_single_line(self) -> None:
        assert indent_block("only", "    ") == "only"


class TestBuildLayout:
    def test_exports_follow_module_order(self) -> None:
        layout = build_layout(
            release=RELEASE,
            modules=["Modal", "Alert"],
            sources=["var Modal;\n", "var Alert;\n"],
            utilities="var BSN = {};\n",
            init="init();\n",
        )
        assert layout.exports == ("Modal", "Alert")
        assert layout.modules == "var Modal;\n  var Alert;"
        assert layout.version == "2.0.27"
        assert layout.header == render_header(RELEASE)

    def test_unterminated_source_gets_newline(self) -> None:
        layout = build_layout(
            release=RELEASE,
            modules=["A", "B"],
            sources=["var A;", "var B;"],
            utilities="",
            init="",
        )
        assert layout.modules == "var A;\n  var B;"

    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_layout(release=RELEASE, modules=["A"], sources=[], utilities="", init="")
