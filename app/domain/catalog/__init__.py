"""
Catalog bounded context: domain layer.

Products offered through the API.
"""
