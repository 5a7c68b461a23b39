"""Core domain layer: exception hierarchy shared by every other layer."""
