"""
Classify router package.

Exports the router for the message classification endpoint.
"""

from .classify_router import router

__all__ = ["router"]
