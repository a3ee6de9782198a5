"""Output layer — diagnostics rendering for the CLI.

Renders ServiceResult for humans (Rich) or machines (--json). The
bundle itself never passes through this layer.
"""
