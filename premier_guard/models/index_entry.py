"""
Index entry models.

Shapes of the records written to the team-name index by the seeding job.

Dependencies: pydantic
System role: Seeding data structures
"""

from pydantic import BaseModel, Field


class TeamRow(BaseModel):
    """One row of the seeding CSV."""

    team: str = Field(description="Team name")


class TeamMetadata(BaseModel):
    """Metadata stored alongside each index entry."""

    team: str


class IndexEntry(BaseModel):
    """Entry upserted into the vector index."""

    id: int = Field(description="Sequential id assigned in CSV row order", ge=0)
    data: str = Field(description="Text embedded by the index")
    metadata: TeamMetadata

    @classmethod
    def from_row(cls, entry_id: int, row: TeamRow) -> "IndexEntry":
        return cls(id=entry_id, data=row.team, metadata=TeamMetadata(team=row.team))
