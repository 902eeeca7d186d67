"""Adapters for the catalog bounded context."""
