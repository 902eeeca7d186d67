"""Service status and diagnostics endpoints."""
