"""Shared services (HTTP session)."""
