"""
Request validation package.

Field-level rules and the concurrent rule runner used by routes
before their payload reaches a use case.
"""
