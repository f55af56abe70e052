"""Role type concept model."""

from pydantic import BaseModel, Field

from src.terminology.role_types import RoleTypeCategory


class RoleTypeConcept(BaseModel):
    """A single ServiceDeliveryLocationRoleType concept in the hierarchy."""

    model_config = {"frozen": True}

    code: str = Field(..., description="Concept code (e.g., 'HOSP')")
    display: str = Field(..., description="Human-readable concept name")
    category: RoleTypeCategory = Field(..., description="Abstract grouping")
    parent_code: str | None = Field(
        default=None, description="Parent concept code (None for top-level)"
    )
    level: int = Field(default=1, ge=1, description="Hierarchy level (1 = top level)")

    @property
    def is_top_level(self) -> bool:
        """Check if this is a top-level concept."""
        return self.parent_code is None
