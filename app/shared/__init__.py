"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Failure classification and the error responder
- Request validation rules
- Security middleware, bearer authentication and rate limiting
- Logging configuration
"""
