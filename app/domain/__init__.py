"""
Domain layer package.

Contains pure business logic: entities, the failure model and port
interfaces. No framework imports, no IO, no side effects.
"""
