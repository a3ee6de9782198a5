"""Domain layer — module names, selection rules, and bundle layout.

This layer depends only on stdlib and :mod:`bsnbundle.errors`.
It must never import from services, infrastructure, commands, or config.
"""
