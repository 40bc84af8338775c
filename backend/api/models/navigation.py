"""
Navigation request models.
"""

from pydantic import BaseModel, ConfigDict, Field


class CommitNavigationRequest(BaseModel):
    """A navigation the client has just committed."""
    model_config = ConfigDict(populate_by_name=True)

    to: str = Field(..., description="Destination path")
    from_path: str = Field(default="", alias="from", description="Previous path")


class ChildRoutesResponse(BaseModel):
    """Registered routes one level below a path."""

    path: str
    children: list[str]
