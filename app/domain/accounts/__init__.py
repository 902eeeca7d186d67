"""
Accounts bounded context: domain layer.

Users, their credentials and the bearer tokens issued to them.
"""
