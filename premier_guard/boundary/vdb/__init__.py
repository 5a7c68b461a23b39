"""
Vector database boundary layer.

Provides the client for the hosted team-name index.
- TeamIndexClient: Upstash Vector client for top-1 queries and upserts

Dependencies: upstash_vector
System role: Vector store adapter for similarity classification
"""

from premier_guard.boundary.vdb.team_index_client import TeamIndexClient

__all__ = ["TeamIndexClient"]
