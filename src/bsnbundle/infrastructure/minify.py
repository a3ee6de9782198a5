"""JavaScript minification via rjsmin."""

from __future__ import annotations

from collections.abc import Callable

import rjsmin

Minifier = Callable[[str], str]


def minify_js(source: str) -> str:
    """Minify JavaScript *source*. Treated as an opaque text transform."""
    return rjsmin.jsmin(source)
