"""Adapters for the accounts bounded context."""
