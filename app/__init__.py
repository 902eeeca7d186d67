"""
API Skeleton: a REST service foundation with a unified error responder.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - accounts: User registration, login, bearer token verification.
    - catalog: Product creation and lookup.

Layers:
    - domain: Entities, ports (ABCs) and the Failure value.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (in-memory stores, Argon2, PyJWT) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, validation rule sets.
    - shared: Cross-cutting concerns (errors, validation, security, logging).
"""
