"""Response models for the typeahead HTTP surface."""

from datetime import datetime

from pydantic import BaseModel, Field

from .entities import Entity


class Suggestion(BaseModel):
    """One row of the typeahead dropdown."""

    name: str = Field(..., description="Entity name")
    type: str = Field(..., description="Entity type, lowercased for display")
    href: str = Field(..., description="Navigation target when selected")
    enclosed_by: str | None = Field(default=None, description="Enclosing entity name")
    score: int = Field(..., ge=0, description="Ranking score")
    label: str = Field(..., description="Rendered suggestion text")

    @classmethod
    def from_match(cls, entity: Entity, score: int) -> "Suggestion":
        """Render an entity the way the dropdown shows it."""
        type_label = entity.type.lower()
        parent = entity.enclosed_by.name if entity.enclosed_by else None
        label = f"{entity.name} {type_label}"
        if parent:
            label += f" from {parent}"
        return cls(
            name=entity.name,
            type=type_label,
            href=entity.href,
            enclosed_by=parent,
            score=score,
            label=label,
        )


class SearchResponse(BaseModel):
    """Result of a typeahead query."""

    query: str = Field(..., description="Query as received")
    total: int = Field(default=0, ge=0, description="Matches before the display cap")
    suggestions: list[Suggestion] = Field(
        default_factory=list, description="Ranked suggestions, best first"
    )


class ReloadResponse(BaseModel):
    """Result of re-fetching the index."""

    entities: int = Field(..., ge=0, description="Entities in the installed index")
    source: str = Field(..., description="Source the index was loaded from")
    message: str = Field(..., description="Human-readable status message")


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Server time")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str = Field(..., description="'ready' or 'not_ready'")
    version: str = Field(..., description="Service version")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual checks")
