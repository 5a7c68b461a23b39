"""
Verdict response model.

Dependencies: pydantic
System role: Classification result returned by POST /
"""

from pydantic import BaseModel, ConfigDict, Field


class Verdict(BaseModel):
    """Final classification for one message."""

    model_config = ConfigDict(populate_by_name=True)

    is_premier_league: bool = Field(alias="isPremierLeague")
    score: float
    flagged_for: str | None = Field(default=None, alias="flaggedFor")

    def to_response(self) -> dict:
        """Serialise with wire names, omitting flaggedFor when unset."""
        return self.model_dump(by_alias=True, exclude_none=True)
