"""Operational scripts run with `python -m premier_guard.scripts.<name>`."""
