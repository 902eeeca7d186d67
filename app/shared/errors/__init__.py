"""
Shared error handling package.

Centralizes failure classification and the error responder so that every
failure, returned or raised, is turned into the same JSON envelope.
"""
