"""Use cases for the catalog bounded context."""
