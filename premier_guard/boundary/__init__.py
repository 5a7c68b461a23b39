"""Boundary layer: adapters for external services."""
