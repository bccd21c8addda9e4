"""Query result models produced by the resolver, search engine and format inspector."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from magentaa11y_mcp.models.domain.content import Component


class ResolvedComponent(Component):
    """A component annotated with its enclosing category at lookup time."""

    category: str
    category_name: str

    @classmethod
    def from_component(
        cls, component: Component, category_label: str, category_name: str
    ) -> "ResolvedComponent":
        """Copy a stored component and attach its parent category info."""
        return cls(
            **component.model_dump(),
            category=category_label,
            category_name=category_name,
        )


class _ResultModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class ComponentSummary(_ResultModel):
    """Listing entry for a component."""

    name: str
    label: str
    category: str
    category_name: str


class CategorySummary(_ResultModel):
    """Listing entry for a category."""

    name: str
    label: str
    component_count: int = Field(ge=0)


class ScoredMatch(_ResultModel):
    """A search hit with its score and the fields that matched."""

    name: str
    label: str
    category: str
    category_name: str
    score: int = Field(ge=1)
    matched_fields: tuple[str, ...]
    general_notes: str | None = None


class FormatReport(_ResultModel):
    """Which optional content sections a component provides."""

    name: str
    label: str
    category: str
    formats: dict[str, bool]


__all__ = [
    "ResolvedComponent",
    "ComponentSummary",
    "CategorySummary",
    "ScoredMatch",
    "FormatReport",
]
