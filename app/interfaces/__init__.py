"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas, request validation
rule sets and dependency wiring. No business logic belongs here.
Routes call use cases and hand failures to the error responder.
"""
