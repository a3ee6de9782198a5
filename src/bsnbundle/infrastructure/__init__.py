"""Infrastructure layer — module directory, concurrent reads, templates, minifier.

This layer depends on stdlib and third-party libs (Jinja2, rjsmin).
It must never import from services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
