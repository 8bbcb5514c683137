"""Searchable documentation entities."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import EntityType


class EnclosingRef(BaseModel):
    """Reference to the entity that lexically contains another one."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Parent entity name")
    type: str | None = Field(default=None, description="Parent entity type")
    href: str | None = Field(default=None, description="Parent navigation target")


class Entity(BaseModel):
    """A single searchable documentation item.

    ``name`` is case-sensitive and not globally unique: the same method name
    can appear under many classes. ``enclosed_by`` is only used for display.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1, description="Entity name as typed by users")
    type: str = Field(default=EntityType.UNKNOWN.value, description="Category tag")
    href: str = Field(default="", description="Navigation target")
    qualified_name: str | None = Field(
        default=None, alias="qualifiedName", description="Fully qualified name"
    )
    enclosed_by: EnclosingRef | None = Field(
        default=None, alias="enclosedBy", description="Lexically enclosing entity"
    )

    @field_validator("type", mode="before")
    @classmethod
    def _default_missing_type(cls, value: object) -> object:
        # Index generators emit null for entities without a category
        return EntityType.UNKNOWN.value if value is None else value

    @field_validator("href", mode="before")
    @classmethod
    def _default_missing_href(cls, value: object) -> object:
        return "" if value is None else value

